"""
DatabaseSeeder persists records deserialized from fixture files.

Internally it keeps each record label mapped to the identifier returned on
insertion, so later fixtures can refer to earlier records with ``REF`` tags.

Example:
    .. code-block:: python

        class User(BaseModel):
            name: str
            email: str

        seeder = DatabaseSeeder("fixtures")

        # sync insertion
        seeder.populate("users.yml", lambda user: users_table.insert(user), record_type=User)

        # async insertion, awaited record by record
        await seeder.populate_async("orders.yml", orders_table.insert, record_type=Order)

Record labels must be unique across a session: registering a label again
overwrites the earlier identifier.
"""

import inspect
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar, Union

from fixseed.seeding.decoder import Decoder
from fixseed.seeding.loader import Reader, load_named_records
from fixseed.seeding.reader import read_file
from fixseed.seeding.registry import NameRegistry
from fixseed.utils.errors import RecordInsertionError
from fixseed.utils.logging import LogContext, get_logger, log_performance

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

PathLike = Union[str, Path]


class DatabaseSeeder:
    """
    Seeding session over any number of fixture files.

    Files are processed in the order the caller populates them, records in
    the order the decoder yields them. Failures abort the current file;
    identifiers already registered stay registered.
    """

    def __init__(
        self,
        base_dir: Optional[PathLike] = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        reader: Reader = read_file,
        decoder: Optional[Decoder] = None,
    ) -> None:
        """
        Initialize the seeder.

        Args:
            base_dir: Directory fixture names are relative to (defaults to settings)
            env: Environment mapping used by ENV tags (defaults to ``os.environ``)
            reader: File reader capability
            decoder: Decoder capability (chosen per file suffix when None)
        """
        self.filenames: list[str] = []
        self.base_dir = base_dir
        self._env = env
        self._reader = reader
        self._decoder = decoder
        self._name_resolver = NameRegistry()

    def set_dir(self, base_dir: PathLike) -> None:
        self.base_dir = base_dir

    @property
    def registry(self) -> NameRegistry:
        """Labels registered so far in this session."""
        return self._name_resolver

    def lookup(self, label: str) -> Optional[str]:
        return self._name_resolver.lookup(label)

    def _load(self, filename: PathLike, record_type: Optional[type[T]]) -> dict[str, Any]:
        records = load_named_records(
            filename,
            self.base_dir,
            self._name_resolver,
            record_type=record_type,
            env=self._env,
            reader=self._reader,
            decoder=self._decoder,
        )
        self.filenames.append(str(filename))
        logger.debug(f"Decoded {len(records)} records from {filename}")
        return records

    def _register(self, label: str, identifier: Any) -> None:
        self._name_resolver.insert(label, identifier)

    @log_performance
    def populate(
        self,
        filename: PathLike,
        loader: Callable[[T], U],
        record_type: Optional[type[T]] = None,
    ) -> list[U]:
        """
        Insert every record of ``filename`` with a synchronous callback.

        Args:
            filename: Fixture file name
            loader: Persists one record and returns its identifier
            record_type: Type records are validated into before insertion

        Returns:
            Identifiers in insertion order

        Raises:
            FixtureNotFoundError: file cannot be read
            TagResolutionError: an embedded tag cannot be resolved
            FixtureDecodeError: the file cannot be decoded
            RecordInsertionError: ``loader`` raised or returned an awaitable
        """
        with LogContext(fixture=str(filename)):
            named_records = self._load(filename, record_type)
            ids: list[U] = []

            for label, record in named_records.items():
                try:
                    identifier = loader(record)
                except Exception as e:
                    raise RecordInsertionError(str(filename), label, str(e)) from e
                if inspect.isawaitable(identifier):
                    if inspect.iscoroutine(identifier):
                        identifier.close()
                    raise RecordInsertionError(
                        str(filename),
                        label,
                        "callback returned an awaitable; use populate_async",
                    )
                self._register(label, identifier)
                ids.append(identifier)

            logger.info(f"Seeded {len(ids)} records from {filename}")
            return ids

    @log_performance
    async def populate_async(
        self,
        filename: PathLike,
        loader: Callable[[T], Union[Awaitable[U], U]],
        record_type: Optional[type[T]] = None,
    ) -> list[U]:
        """
        Insert every record of ``filename`` with a callback that may be async.

        Each awaitable returned by ``loader`` is awaited before the next record
        is inserted, so identifiers are registered in order.

        Args:
            filename: Fixture file name
            loader: Persists one record and returns (an awaitable of) its identifier
            record_type: Type records are validated into before insertion

        Returns:
            Identifiers in insertion order

        Raises:
            FixtureNotFoundError: file cannot be read
            TagResolutionError: an embedded tag cannot be resolved
            FixtureDecodeError: the file cannot be decoded
            RecordInsertionError: ``loader`` raised for a record
        """
        with LogContext(fixture=str(filename)):
            named_records = self._load(filename, record_type)
            ids: list[U] = []

            for label, record in named_records.items():
                try:
                    identifier = loader(record)
                    if inspect.isawaitable(identifier):
                        identifier = await identifier
                except Exception as e:
                    raise RecordInsertionError(str(filename), label, str(e)) from e
                self._register(label, identifier)
                ids.append(identifier)

            logger.info(f"Seeded {len(ids)} records from {filename}")
            return ids
