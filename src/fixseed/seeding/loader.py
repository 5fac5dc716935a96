"""
Record loading pipeline: read, substitute embedded tags, decode, validate.

This module also provides RecordLoader, a container holding the decoded
records of one fixture file for later lookups by label.
"""

from pathlib import Path
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from fixseed.seeding.decoder import Decoder, decoder_for
from fixseed.seeding.reader import read_file
from fixseed.tags.assembler import substitute
from fixseed.utils.errors import (
    AlreadyLoadedError,
    FixtureDecodeError,
    NotLoadedError,
    RecordNotFoundError,
    TagResolutionError,
)
from fixseed.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

PathLike = Union[str, Path]
Reader = Callable[[PathLike, Optional[PathLike]], str]


def load_named_records(
    filename: PathLike,
    base_dir: Optional[PathLike] = None,
    dependencies: Optional[Mapping[str, str]] = None,
    *,
    record_type: Optional[type[T]] = None,
    env: Optional[Mapping[str, str]] = None,
    reader: Reader = read_file,
    decoder: Optional[Decoder] = None,
) -> dict[str, Any]:
    """
    Load the labeled records of one fixture file.

    Args:
        filename: Fixture file name
        base_dir: Directory the file name is relative to
        dependencies: Label to identifier mapping used by REF tags
        record_type: Type every record is validated into (raw records when None)
        env: Environment mapping used by ENV tags (defaults to ``os.environ``)
        reader: File reader capability
        decoder: Decoder capability (chosen from the file suffix when None)

    Returns:
        Ordered mapping of label to record

    Raises:
        FixtureNotFoundError: file cannot be read
        TagResolutionError: an embedded tag cannot be resolved
        FixtureDecodeError: text or a record cannot be decoded
    """
    raw_text = reader(filename, base_dir)

    try:
        parsed_text = substitute(raw_text, dependencies or {}, env)
    except TagResolutionError as e:
        e.details["filename"] = str(filename)
        logger.error(f"Failed to pre-process embedded tags in {filename}: {e.message}")
        raise

    decode = decoder or decoder_for(filename)
    try:
        raw_records = decode(parsed_text)
    except ValueError as e:
        raise FixtureDecodeError(str(filename), str(e)) from e

    if record_type is None:
        return dict(raw_records)

    adapter = TypeAdapter(record_type)
    records: dict[str, Any] = {}
    for label, raw in raw_records.items():
        try:
            records[label] = adapter.validate_python(raw)
        except ValidationError as e:
            raise FixtureDecodeError(str(filename), str(e), label=label) from e
    return records


class RecordLoader(Generic[T]):
    """
    Holds the decoded records of one fixture file, keyed by label.

    Records can be loaded once; loading again raises AlreadyLoadedError.
    Labels must be unique within the file.
    """

    def __init__(
        self,
        filename: PathLike,
        base_dir: Optional[PathLike] = None,
        record_type: Optional[type[T]] = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        reader: Reader = read_file,
        decoder: Optional[Decoder] = None,
    ) -> None:
        self.filename = str(filename)
        self.base_dir = base_dir
        self.record_type = record_type
        self._env = env
        self._reader = reader
        self._decoder = decoder
        self._named_records: Optional[dict[str, T]] = None

    @property
    def is_loaded(self) -> bool:
        return self._named_records is not None

    def load(self, dependencies: Optional[Mapping[str, str]] = None) -> "RecordLoader[T]":
        """
        Read and decode the file, resolving REF tags against ``dependencies``.

        Raises:
            AlreadyLoadedError: records were loaded before
        """
        logger.info(f"Loading {self.filename}...")

        if self.is_loaded:
            raise AlreadyLoadedError(self.filename)

        self._named_records = load_named_records(
            self.filename,
            self.base_dir,
            dependencies,
            record_type=self.record_type,
            env=self._env,
            reader=self._reader,
            decoder=self._decoder,
        )
        return self

    def get(self, label: str) -> T:
        """
        Return the record stored under ``label``.

        Raises:
            NotLoadedError: nothing has been loaded yet
            RecordNotFoundError: no record has that label
        """
        records = self._get_records()
        try:
            return records[label]
        except KeyError:
            raise RecordNotFoundError(self.filename, label) from None

    def get_all_records(self) -> dict[str, T]:
        return self._get_records()

    def _get_records(self) -> dict[str, T]:
        if self._named_records is None:
            raise NotLoadedError(self.filename)
        return self._named_records
