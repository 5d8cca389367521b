"""
Storage adapter for the Files API.

A base class fixes the contract the routes rely on (list, exists, read, write,
delete addressed by filename) and LocalStorage implements it over one root
directory on the local filesystem.
"""

import logging
from pathlib import Path
from typing import List, Optional

from filestore_api.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base error raised by storage handlers."""


class InvalidFilenameError(StorageError):
    """Raised when a filename does not address a file directly under the root."""


class BaseStorage:
    """Base class for storage handling (to be extended by specific implementations)"""

    root_dir: Path

    def list(self) -> List[str]:
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        raise NotImplementedError

    def read(self, name: str) -> bytes:
        raise NotImplementedError

    def write(self, name: str, data: bytes) -> None:
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError


class LocalStorage(BaseStorage):
    """Handles files stored flat in a local directory"""

    def __init__(self, root_dir):
        self.root_dir = Path(root_dir).resolve()
        self.root_dir.mkdir(parents=True, exist_ok=True)
        logger.info("LocalStorage initialized at: %s", self.root_dir)

    def _path_for(self, name: str) -> Path:
        """Map a filename to its path under the root, rejecting anything else."""
        if not name or name in (".", "..") or "/" in name or "\\" in name or "\x00" in name:
            raise InvalidFilenameError(f"Invalid filename: {name!r}")

        path = (self.root_dir / name).resolve()
        if path.parent != self.root_dir:
            raise InvalidFilenameError(f"Filename escapes storage root: {name!r}")
        return path

    def list(self) -> List[str]:
        """List the names of the regular files directly under the root."""
        return sorted(entry.name for entry in self.root_dir.iterdir() if entry.is_file())

    def exists(self, name: str) -> bool:
        """Check if a regular file with this name exists. Names that cannot be stored never exist."""
        try:
            path = self._path_for(name)
        except InvalidFilenameError:
            return False
        return path.is_file()

    def read(self, name: str) -> bytes:
        """Read the full content of a file."""
        return self._path_for(name).read_bytes()

    def write(self, name: str, data: bytes) -> None:
        """Create the file or replace its whole content."""
        path = self._path_for(name)
        path.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def delete(self, name: str) -> None:
        """Remove a file from the root."""
        path = self._path_for(name)
        path.unlink()
        logger.debug("Deleted %s", path)


class StorageFactory:
    """Factory to initialize the correct storage handler based on settings"""

    @staticmethod
    def get_storage_handler(settings: Optional[Settings] = None) -> BaseStorage:
        settings = settings or get_settings()

        storage_classes = {
            "local": LocalStorage,
        }

        backend = settings.storage_backend
        if backend not in storage_classes:
            raise ValueError(
                f"Invalid storage_backend: {backend}. "
                f"Choose from {list(storage_classes.keys())}"
            )

        logger.info(f"Creating storage handler for backend: {backend}")
        return storage_classes[backend](settings.storage_dir)
