"""Directory-of-JSON-files mechanics shared by the note and PDF stores."""

import os
import tempfile
import threading
import weakref
from contextlib import contextmanager
from pathlib import Path
from typing import Generic, Iterator, List, TypeVar

from loguru import logger
from pydantic import ValidationError

from flownotes.domain.common import FlowModel
from flownotes.errors import InvalidIdError, NotFoundError, ParseError, StoreIOError
from flownotes.storage.paths import DirectoryResolver

RecordT = TypeVar("RecordT", bound=FlowModel)

SUFFIX = ".json"


class JsonRecordStore(Generic[RecordT]):
    """Stores one record per `<id>.json` file in a single directory.

    There is no index: the directory listing is the collection. Writes go to a
    temporary file first and are renamed into place, so readers never see a
    half-written record. Operations on the same id within this process can be
    serialised with `lock`.
    """

    record_type: type[RecordT]
    record_label: str
    store_name: str

    def __init__(self, resolver: DirectoryResolver) -> None:
        self._resolver = resolver
        self._locks: weakref.WeakValueDictionary[str, threading.RLock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    @property
    def directory(self) -> Path:
        return self._resolver.resolve(self.store_name)

    def path_for(self, record_id: str) -> Path:
        if (
            not record_id
            or record_id.startswith(".")
            or "/" in record_id
            or "\\" in record_id
            or "\0" in record_id
        ):
            raise InvalidIdError(f"Invalid id: {record_id!r}")
        return self.directory / f"{record_id}{SUFFIX}"

    @contextmanager
    def lock(self, record_id: str) -> Iterator[None]:
        """Hold the per-id lock for the duration of the block."""
        with self._locks_guard:
            record_lock = self._locks.get(record_id)
            if record_lock is None:
                record_lock = threading.RLock()
                self._locks[record_id] = record_lock
        with record_lock:
            yield

    def read(self, record_id: str) -> RecordT:
        path = self.path_for(record_id)
        if not path.exists():
            raise NotFoundError(f"{self.record_label} not found")
        return self._read_path(path)

    def write(self, record: RecordT) -> None:
        path = self.path_for(record.id)
        try:
            payload = record.to_json()
        except (TypeError, ValueError) as e:
            raise ParseError(f"Failed to serialize {self.record_label} {record.id}: {e}") from e

        try:
            fd, tmp_path = tempfile.mkstemp(suffix=".tmp", prefix=".tmp_", dir=path.parent)
        except OSError as e:
            raise StoreIOError(f"Failed to write {path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreIOError(f"Failed to write {path}: {e}") from e
        logger.debug(f"Wrote {path}")

    def scan(self) -> List[RecordT]:
        """Parse every record file in the directory, skipping ones that fail to parse."""
        directory = self.directory
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            raise StoreIOError(f"Failed to list {directory}: {e}") from e

        records = []
        for path in entries:
            if path.suffix != SUFFIX or path.name.startswith(".") or not path.is_file():
                continue
            try:
                records.append(self._read_path(path))
            except NotFoundError:
                # Removed between listing and reading
                continue
            except ParseError as e:
                logger.warning(f"Skipping unreadable {self.store_name} file {path.name}: {e}")
        return records

    def remove(self, record_id: str) -> bool:
        """Delete the record file. Returns False if there was nothing to delete."""
        path = self.path_for(record_id)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StoreIOError(f"Failed to delete {path}: {e}") from e
        return True

    def _read_path(self, path: Path) -> RecordT:
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError(f"{self.record_label} not found") from e
        except UnicodeDecodeError as e:
            raise ParseError(f"Invalid {self.record_label} file {path.name}: {e}") from e
        except OSError as e:
            raise StoreIOError(f"Failed to read {path}: {e}") from e

        try:
            return self.record_type.model_validate_json(content)
        except ValidationError as e:
            raise ParseError(f"Invalid {self.record_label} file {path.name}: {e}") from e
