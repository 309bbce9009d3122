import zipfile
import zlib
from types import TracebackType
from typing import Optional, Type

from .errors import ArchiveOpenError, EntryNotFoundError

_READ_ERRORS = (zipfile.BadZipFile, OSError, RuntimeError, NotImplementedError, EOFError, zlib.error)


class ModArchive:
    """Read-only handle on a mod jar."""

    def __init__(self, path: str) -> None:
        self.path = path
        try:
            self._zip = zipfile.ZipFile(path, "r")
        except _READ_ERRORS as e:
            raise ArchiveOpenError(path, str(e)) from e

    def read_entry(self, entry: str) -> bytes:
        try:
            return self._zip.read(entry)
        except KeyError as e:
            raise EntryNotFoundError(entry) from e
        except _READ_ERRORS as e:
            raise EntryNotFoundError(entry) from e

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ModArchive":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def open_archive(path: str) -> ModArchive:
    return ModArchive(path)
