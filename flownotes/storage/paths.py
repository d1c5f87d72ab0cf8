from functools import cached_property
from pathlib import Path

import platformdirs
from loguru import logger

from flownotes.errors import ConfigError, StoreIOError

NOTES = "notes"
PDFS = "pdfs"
STORE_NAMES = (NOTES, PDFS)


class DirectoryResolver:
    """Resolves the storage directory of each store, creating it when missing."""

    def __init__(self, data_dir: str | Path | None = None, app_dir_name: str = "flow-notes") -> None:
        """Initialize DirectoryResolver.

        Args:
            data_dir: Base data directory. If not provided, the platform's user data
                      directory is used (e.g. ~/.local/share on Linux).
            app_dir_name: Name of the application folder created under the data directory.
        """
        self._data_dir = Path(data_dir) if data_dir else None
        self._app_dir_name = app_dir_name

    @cached_property
    def root(self) -> Path:
        """Absolute path of the application folder, `<data-dir>/<app_dir_name>`."""
        if self._data_dir is not None:
            base = self._data_dir
        else:
            try:
                base = Path(platformdirs.user_data_dir())
            except Exception as e:
                raise ConfigError(f"Failed to get app data directory: {e}") from e
            if not str(base):
                raise ConfigError("Failed to get app data directory")
        return base.expanduser().absolute() / self._app_dir_name

    def resolve(self, name: str) -> Path:
        """Return the directory of the named store, creating it and its parents if needed."""
        if name not in STORE_NAMES:
            raise ValueError(f"Unknown store {name!r}, expected one of {STORE_NAMES}")

        directory = self.root / name
        if not directory.is_dir():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StoreIOError(f"Failed to create directory {directory}: {e}") from e
            logger.info(f"Created {name} directory at {directory}")
        return directory

    def notes_dir(self) -> Path:
        return self.resolve(NOTES)

    def pdfs_dir(self) -> Path:
        return self.resolve(PDFS)
