"""
Text assembler that replaces every embedded tag before deserialization.
"""

from typing import Mapping, Optional

from fixseed.models import Directive
from fixseed.tags.resolver import resolve
from fixseed.tags.scanner import iter_tags, scan


def substitute(raw_text: str, registry: Mapping[str, str], env: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace all tags in ``raw_text``.

    Args:
        raw_text: Fixture text as read from disk
        registry: Label to identifier mapping used by REF tags
        env: Environment mapping used by ENV tags (defaults to ``os.environ``)

    Returns:
        Text with every well-formed tag replaced

    Raises:
        TagResolutionError: the first tag that cannot be resolved; no partial
            text is returned
    """
    index = 0
    parts: list[str] = []

    while index < len(raw_text):
        tag = scan(raw_text, index)
        if tag is None:
            parts.append(raw_text[index:])
            break

        replacement = resolve(tag.directive, tag.key, tag.default, registry, env)
        parts.append(raw_text[index : tag.start])
        parts.append(replacement)
        index = tag.end

    return "".join(parts)


def referenced_labels(raw_text: str) -> list[str]:
    """Return the record labels ``raw_text`` refers to, in order of first use."""
    labels: list[str] = []
    for tag in iter_tags(raw_text):
        if tag.directive == Directive.REF.value and tag.key not in labels:
            labels.append(tag.key)
    return labels
