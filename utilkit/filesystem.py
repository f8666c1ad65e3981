"""Portable path handling and filesystem helpers.

Paths are normalised on construction: both ``/`` and ``\\`` are turned into
the platform's preferred separator, and the path is kept as a string together
with its list of components.
"""

from __future__ import annotations

import errno
import os
import secrets
import stat
import string
from typing import Iterable, Iterator, Union

__all__ = [
    "Path",
    "is_regular_file",
    "is_directory",
    "file_size",
    "exists",
    "temp_directory_path",
    "create_temp_directory",
    "current_path",
    "create_directories",
    "remove",
    "remove_all",
    "remove_extension",
]

_SEP = os.sep
_ON_WINDOWS = os.name == "nt"
_TEMP_CHARS = string.ascii_letters + string.digits
_TEMP_SUFFIX_LENGTH = 6
_TEMP_ATTEMPTS = 1000


def _split(text: str, delim: str) -> list[str]:
    """Split like a line reader: no pieces for an empty text, no trailing empty piece."""
    if not text:
        return []
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def _has_drive_letter(text: str) -> bool:
    """True for an absolute path that starts with a drive letter (Windows only)."""
    if not _ON_WINDOWS or not text:
        return False
    return text[1:3] == ":\\"


class Path:
    """A filesystem path stored with native separators."""

    __slots__ = ("_path", "_parts")

    def __init__(self, p: Union[str, "Path"] = "") -> None:
        if isinstance(p, Path):
            self._path = p._path
            self._parts = p._parts
            return
        text = os.fspath(p).replace("\\", _SEP).replace("/", _SEP)
        self._path = text
        self._parts = tuple(_split(text, _SEP))

    @classmethod
    def _from_parts(cls, text: str, parts: Iterable[str]) -> "Path":
        result = cls.__new__(cls)
        result._path = text
        result._parts = tuple(parts)
        return result

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __truediv__(self, other: Union[str, "Path"]) -> "Path":
        other = Path(other)
        if other.is_absolute():
            return Path(other)
        text = self._path
        if not text or text[-1] != _SEP:
            text += _SEP
        text += other._path
        return Path._from_parts(text, self._parts + other._parts)

    def string(self) -> str:
        """Return the path as a string."""
        return self._path

    def exists(self) -> bool:
        """True if something exists at this path."""
        return bool(self._path) and os.access(self._path, os.F_OK)

    def _stat_mode(self) -> int | None:
        try:
            return os.stat(self._path).st_mode
        except (OSError, ValueError):
            return None

    def is_directory(self) -> bool:
        """True if the path names a directory."""
        mode = self._stat_mode()
        return mode is not None and stat.S_ISDIR(mode)

    def is_regular_file(self) -> bool:
        """True if the path names a regular file."""
        mode = self._stat_mode()
        return mode is not None and stat.S_ISREG(mode)

    def file_size(self) -> int:
        """Return the size in bytes of the file; raise OSError for directories or missing files."""
        if self.is_directory():
            raise IsADirectoryError(errno.EISDIR, "cannot get file size", self._path)
        try:
            return os.stat(self._path).st_size
        except OSError as error:
            raise OSError(error.errno, "cannot get file size", self._path) from error

    def empty(self) -> bool:
        """True if the path is the empty string."""
        return not self._path

    def is_absolute(self) -> bool:
        """True if the path starts at a root (or, on Windows, at a drive)."""
        return bool(self._path) and (
            self._path[0] == _SEP or _has_drive_letter(self._path)
        )

    def parent_path(self) -> "Path":
        """Return the path without its last component."""
        if self.empty():
            return Path("")

        drive = _has_drive_letter(self._path)
        parts = self._parts
        if len(parts) == 1:
            if self.is_absolute():
                if drive:
                    return Path(parts[0] + _SEP)
                return Path(_SEP)
            return Path(".")

        if len(parts) == 2 and drive:
            return Path(parts[0] + _SEP)

        absolute = self.is_absolute()
        parent = Path()
        for piece in parts[:-1]:
            if parent.empty() and (not absolute or drive):
                parent = Path(piece)
            else:
                parent = parent / piece
        return parent

    def filename(self) -> "Path":
        """Return the last component of the path."""
        if not self._path or not self._parts:
            return Path()
        return Path(self._parts[-1])

    def extension(self) -> "Path":
        """Return the text after the last dot, with the dot, or an empty path."""
        pieces = _split(self._path, ".")
        if len(pieces) == 1:
            return Path("")
        return Path("." + (pieces[-1] if pieces else ""))


PathLike = Union[str, Path]


def is_regular_file(p: PathLike) -> bool:
    """True if ``p`` names a regular file."""
    return Path(p).is_regular_file()


def is_directory(p: PathLike) -> bool:
    """True if ``p`` names a directory."""
    return Path(p).is_directory()


def file_size(p: PathLike) -> int:
    """Return the size in bytes of the file at ``p``."""
    return Path(p).file_size()


def exists(p: PathLike) -> bool:
    """True if something exists at ``p``."""
    return Path(p).exists()


def temp_directory_path() -> Path:
    """Return the directory for temporary files."""
    if _ON_WINDOWS:
        import tempfile

        return Path(tempfile.gettempdir())
    value = os.environ.get("TMPDIR")
    if not value:
        value = "/tmp"
    return Path(value)


def create_temp_directory(base_name: str, parent_path: PathLike | None = None) -> Path:
    """Create a new uniquely named directory ``base_name`` + six random characters.

    The parent directory (the temporary directory by default) is created
    first if it does not exist. Raises OSError on failure.
    """
    parent = temp_directory_path() if parent_path is None else Path(parent_path)
    if not create_directories(parent):
        raise OSError(
            errno.ENOENT, "could not create the parent directory", parent.string()
        )

    candidate = parent
    for _ in range(_TEMP_ATTEMPTS):
        suffix = "".join(
            secrets.choice(_TEMP_CHARS) for _ in range(_TEMP_SUFFIX_LENGTH)
        )
        candidate = parent / (base_name + suffix)
        try:
            os.mkdir(candidate.string(), 0o700)
        except FileExistsError:
            continue
        except OSError as error:
            raise OSError(
                error.errno,
                "could not format or create the temp directory",
                candidate.string(),
            ) from error
        return candidate
    raise FileExistsError(
        errno.EEXIST, "could not format or create the temp directory", candidate.string()
    )


def current_path() -> Path:
    """Return the current working directory."""
    return Path(os.getcwd())


def create_directories(p: PathLike) -> bool:
    """Create every missing directory along ``p``; True if ``p`` is then a directory."""
    built = Path()
    ok = True
    for piece in Path(p):
        if not built.empty() or not piece:
            built = built / piece
        else:
            built = Path(piece)
        if not built.exists():
            try:
                os.mkdir(built.string(), 0o777)
            except FileExistsError:
                pass
            except OSError:
                ok = False
                break
    return ok and built.is_directory()


def remove(p: PathLike) -> bool:
    """Remove a file or an empty directory; True on success."""
    target = Path(p).string()
    try:
        if os.path.isdir(target) and not os.path.islink(target):
            os.rmdir(target)
        else:
            os.remove(target)
    except (OSError, ValueError):
        return False
    return True


def remove_all(p: PathLike) -> bool:
    """Remove ``p`` and, for a directory, everything beneath it; True on success."""
    root = Path(p)
    if not root.is_directory():
        return remove(root)

    try:
        names = os.listdir(root.string())
    except OSError:
        return False

    for name in names:
        child = root / name
        if child.is_directory() and not os.path.islink(child.string()):
            if not remove_all(child):
                return False
        elif not remove(child):
            return False

    remove(root)
    return not root.exists()


def remove_extension(file_path: PathLike, n_times: int = 1) -> Path:
    """Strip up to ``n_times`` trailing extensions from the path."""
    result = Path(file_path)
    for _ in range(n_times):
        text = result.string()
        last_dot = text.rfind(".")
        if last_dot == -1:
            return result
        result = Path(text[:last_dot])
    return result