"""File-system helpers: existence checks, directories, renaming and path expansion."""

from __future__ import annotations

import contextlib
import os
import stat
from typing import List, Optional

_WINDOWS = os.name == "nt"

if not _WINDOWS:
    import pwd

_SKIP_FILES = frozenset({".", "..", ".DS_Store"})


def directory_path_separator() -> str:
    """Return the character that separates directories in a path."""
    return "\\" if _WINDOWS else "/"


def search_path_separator() -> str:
    """Return the character that separates entries in a search path."""
    return ";" if _WINDOWS else ":"


def _mode(path: str, follow_links: bool) -> Optional[int]:
    try:
        info = os.stat(path) if follow_links else os.lstat(path)
    except (OSError, ValueError):
        return None
    return info.st_mode


def file_exists(path: str) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    if path is None:
        raise TypeError("file_exists: None filename")
    return _mode(path, follow_links=True) is not None


def is_file(path: str) -> bool:
    """Return True if ``path`` names a regular file."""
    mode = _mode(path, follow_links=_WINDOWS)
    return mode is not None and stat.S_ISREG(mode)


def is_symbolic_link(path: str) -> bool:
    """Return True if ``path`` names a symbolic link."""
    if _WINDOWS:
        return False
    mode = _mode(path, follow_links=False)
    return mode is not None and stat.S_ISLNK(mode)


def is_directory(path: str) -> bool:
    """Return True if ``path`` names a directory."""
    mode = _mode(path, follow_links=_WINDOWS)
    return mode is not None and stat.S_ISDIR(mode)


def create_directory(path: str) -> None:
    """Create the directory ``path``; an existing directory is left alone."""
    if path.endswith("/"):
        path = path[:-1]
    try:
        os.mkdir(path, 0o777)
    except FileExistsError as exc:
        if is_directory(path):
            return
        raise FileExistsError(exc.errno, f"create_directory: {exc.strerror}", path) from exc
    except OSError as exc:
        raise OSError(exc.errno, f"create_directory: {exc.strerror}", path) from exc


def delete_file(filename: str) -> None:
    """Delete ``filename``; a file that does not exist is not an error."""
    try:
        os.unlink(filename)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise OSError(exc.errno, f"delete_file: {exc.strerror}", filename) from exc


def rename_file(oldname: str, newname: str) -> None:
    """Rename ``oldname`` to ``newname``."""
    try:
        os.rename(oldname, newname)
    except OSError as exc:
        raise OSError(exc.errno, f"rename_file: {exc.strerror}", oldname) from exc


def list_directory(path: Optional[str] = None) -> List[str]:
    """Return the sorted names in directory ``path`` (the current one by default).

    The entries ``.``, ``..`` and ``.DS_Store`` are left out.
    """
    expanded = expand_pathname("." if path is None else path)
    try:
        names = os.listdir(expanded)
    except OSError as exc:
        raise OSError(
            exc.errno, f"list_directory: Can't open directory {expanded}", expanded
        ) from exc
    return sorted(name for name in names if name not in _SKIP_FILES)


def set_current_directory(path: str) -> None:
    """Change the working directory; a failed change leaves it as it was."""
    with contextlib.suppress(OSError):
        os.chdir(path)


def get_current_directory() -> str:
    """Return the current working directory."""
    return os.getcwd()


def _home_directory() -> str:
    home = os.environ.get("HOME")
    if home is not None:
        return home
    if _WINDOWS:
        raise KeyError("expand_pathname: No HOME environment variable")
    return pwd.getpwuid(os.getuid()).pw_dir


def _user_directory(user: str) -> str:
    if _WINDOWS:
        return "\\Users\\" + user
    try:
        return pwd.getpwnam(user).pw_dir
    except KeyError:
        raise ValueError(f"expand_pathname: No user {user}") from None


def expand_pathname(filename: str) -> str:
    """Expand a leading ``~`` or ``~user`` and use the platform's separator."""
    if filename.startswith("~"):
        end = next(
            (i for i, ch in enumerate(filename) if ch in "/\\"), len(filename)
        )
        home = _home_directory() if end == 1 else _user_directory(filename[1:end])
        filename = home + filename[end:]
    if _WINDOWS:
        return filename.replace("/", "\\")
    return filename.replace("\\", "/")