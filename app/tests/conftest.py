import pytest

from tests.factories.translation import make_translator


@pytest.fixture
def translator():
    """Translator with languages pt/en/it and the greetings message."""
    return make_translator()
