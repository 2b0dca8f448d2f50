"""Single-pass placeholder substitution.

Placeholders are literal substrings, so all of a message's bound names are
compiled into one regex alternation and replaced in a single ``Pattern.sub``
scan. At each position the scan tries the names in order and takes the
first one that matches (leftmost-first). Replacement values are emitted by
a callback and never rescanned, so a value that looks like a placeholder
is left as it is.
"""

import re
from functools import lru_cache
from typing import Dict, Optional, Pattern, Sequence, Tuple

from core.logging import get_module_logger
from translation.errors import SubstitutionEngineError

logger = get_module_logger()

MATCHER_CACHE_SIZE = 256


@lru_cache(maxsize=MATCHER_CACHE_SIZE)
def build_matcher(placeholders: Tuple[str, ...]) -> Pattern[str]:
    """Compile a leftmost-first matcher for the given placeholder names.

    Args:
        placeholders: Placeholder names, highest priority first.

    Returns:
        Compiled pattern matching any of the names literally.

    Raises:
        SubstitutionEngineError: If the pattern cannot be compiled.
    """
    try:
        return re.compile("|".join(re.escape(name) for name in placeholders))
    except (re.error, OverflowError, RecursionError) as e:
        logger.error(
            "matcher_build_failed",
            placeholder_count=len(placeholders),
            error=str(e),
        )
        raise SubstitutionEngineError(str(e)) from e


def substitute(template: str, bindings: Sequence[Tuple[str, str]]) -> str:
    """Replace every bound placeholder in a template in one pass.

    Args:
        template: Template text with literal placeholder markers.
        bindings: Ordered (placeholder, value) pairs; earlier names win when
            several match at the same position.

    Returns:
        The substituted text. The template is returned unchanged when no
        bindings are given.

    Raises:
        SubstitutionEngineError: If the matcher cannot be built or applied.
    """
    if not bindings:
        return template

    values: Dict[str, str] = dict(bindings)
    matcher = build_matcher(tuple(name for name, _ in bindings))

    try:
        return matcher.sub(lambda match: values[match.group(0)], template)
    except (re.error, RecursionError) as e:
        logger.error("substitution_failed", error=str(e))
        raise SubstitutionEngineError(str(e)) from e


def find_prefix_collision(placeholders: Sequence[str]) -> Optional[Tuple[str, str]]:
    """Find a placeholder that is a proper prefix of another one.

    Args:
        placeholders: Declared placeholder names.

    Returns:
        The first (prefix, longer) pair in declaration order, or None.
    """
    for name in placeholders:
        for other in placeholders:
            if other != name and other.startswith(name):
                return name, other
    return None
