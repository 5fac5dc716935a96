"""
Embedded tag scanner.

Tags must be surrounded by two consecutive braces after a dollar sign:
``${{ ... }}``. Inside there is a directive followed by a key in
parentheses, optionally followed by a default value::

    ${{ ENV(DATABASE_HOST) }}
    ${{ ENV(COUNTRY_CODE:-44) }}
    ${{ ENV(EMAIL:-"developer@example.com") }}
    ${{ REF(alice) }}

Constraints:
    - directives consist of ASCII letters and digits
    - keys consist of ASCII letters, digits, ``_`` and ``-``
    - defaults are either alphanumeric, or a double-quoted string without
      embedded double quotes or control characters (the quotes are kept)
    - whitespace, including non-ASCII spaces, may surround every token

Anything that does not fit this grammar is ordinary text. Scanning never
raises for malformed tags.
"""

import re
from typing import Iterator, Optional

from fixseed.models import TagMatch

# Unicode White_Space; str.isspace() also counts the separators U+001C-U+001F
_WS = r"[^\S\x1c-\x1f]*"

TAG_PATTERN = re.compile(
    r"\$\{\{" + _WS
    + r"(?P<directive>[A-Za-z0-9]+)" + _WS
    + r"\(" + _WS
    + r"(?P<key>[A-Za-z0-9_-]+)"
    + r"(?:" + _WS + r":-" + _WS + r'(?P<default>[A-Za-z0-9]+|"[^"\x00-\x1f\x7f]+"))?'
    + _WS + r"\)"
    + _WS + r"\}\}"
)


def scan(text: str, pos: int = 0) -> Optional[TagMatch]:
    """
    Find the leftmost well-formed tag in ``text`` starting at ``pos``.

    Args:
        text: Text to search
        pos: Offset to start searching from

    Returns:
        TagMatch with offsets into ``text``, or None when no tag remains
    """
    match = TAG_PATTERN.search(text, pos)
    if match is None:
        return None

    return TagMatch(
        directive=match.group("directive"),
        key=match.group("key"),
        default=match.group("default"),
        start=match.start(),
        end=match.end(),
    )


def iter_tags(text: str) -> Iterator[TagMatch]:
    """Yield every tag in ``text`` from left to right."""
    pos = 0
    while (tag := scan(text, pos)) is not None:
        yield tag
        pos = tag.end
