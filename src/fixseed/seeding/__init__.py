"""
Seeding package: fixture reading, decoding and record insertion.
"""

from .decoder import decode_json, decode_yaml, decoder_for
from .loader import RecordLoader, load_named_records
from .reader import read_file, resolve_path
from .registry import NameRegistry
from .seeder import DatabaseSeeder

__all__ = [
    "DatabaseSeeder",
    "NameRegistry",
    "RecordLoader",
    "decode_json",
    "decode_yaml",
    "decoder_for",
    "load_named_records",
    "read_file",
    "resolve_path",
]
