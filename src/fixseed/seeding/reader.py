"""
Fixture file reader.
"""

from pathlib import Path
from typing import Optional, Union

from fixseed.config import get_settings
from fixseed.utils.errors import FixtureNotFoundError
from fixseed.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def resolve_path(filename: PathLike, base_dir: Optional[PathLike] = None) -> Path:
    """
    Join ``filename`` onto ``base_dir``.

    ``base_dir`` falls back to ``Settings.fixtures_dir``. An absolute
    ``filename`` is returned unchanged.
    """
    if base_dir is None:
        base_dir = get_settings().fixtures_dir
    return Path(base_dir) / filename


def read_file(filename: PathLike, base_dir: Optional[PathLike] = None) -> str:
    """
    Read a fixture file as text.

    Args:
        filename: File name, relative to ``base_dir`` unless absolute
        base_dir: Directory holding the fixtures

    Returns:
        File contents

    Raises:
        FixtureNotFoundError: file is missing or cannot be read
    """
    path = resolve_path(filename, base_dir)
    logger.debug(f"Reading fixture file {path}")

    try:
        return path.read_text(encoding=get_settings().encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureNotFoundError(str(path), str(e)) from e
