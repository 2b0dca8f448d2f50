"""Feature-level fixtures for translation registry tests."""

import pytest

from tests.factories.translation import make_translator


@pytest.fixture
def collision_translator():
    """Translator whose message declares NAME before NAME2."""
    return make_translator(
        messages=[
            (
                "greetings",
                ["NAME", "NAME2"],
                {
                    "en": "Hi NAME! Hi NAME2!",
                    "pt": "Oi NAME! Oi NAME2!",
                    "it": "Ciao NAME! Ciao NAME2!",
                },
            )
        ]
    )


@pytest.fixture
def multi_placeholder_messages():
    """Message specs with several placeholders each."""
    return [
        (
            "order.shipped",
            ["ORDER", "CARRIER"],
            {
                "en": "Order ORDER shipped with CARRIER",
                "pt": "Pedido ORDER enviado por CARRIER",
                "it": "Ordine ORDER spedito con CARRIER",
            },
        ),
        (
            "order.empty",
            [],
            {
                "en": "Your cart is empty",
                "pt": "Seu carrinho está vazio",
                "it": "Il carrello è vuoto",
            },
        ),
    ]
