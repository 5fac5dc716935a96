"""
Embedded tag engine: scanning, directive resolution and text substitution.
"""

from .assembler import referenced_labels, substitute
from .resolver import resolve, resolve_env, resolve_ref
from .scanner import TAG_PATTERN, iter_tags, scan

__all__ = [
    "TAG_PATTERN",
    "iter_tags",
    "referenced_labels",
    "resolve",
    "resolve_env",
    "resolve_ref",
    "scan",
    "substitute",
]
