"""
fixseed: load fixture records from text files and seed them into a database.

Fixture files may embed ``${{ ENV(NAME) }}`` and ``${{ REF(label) }}`` tags
that are replaced before the text is decoded, so records can pick up
environment values and the identifiers of records seeded earlier.
"""

from fixseed.models import Directive, TagMatch
from fixseed.seeding import DatabaseSeeder, NameRegistry, RecordLoader
from fixseed.tags import scan, substitute

__version__ = "0.1.0"

__all__ = [
    "DatabaseSeeder",
    "Directive",
    "NameRegistry",
    "RecordLoader",
    "TagMatch",
    "scan",
    "substitute",
]
