"""Where the open project lives, and copying assets into it."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

MODELS_DIR = "Models"
TEXTURES_DIR = "Textures"
SCRIPTS_DIR = "Scripts"

_FORBIDDEN_NAME_CHARS = frozenset('/:*?"<>|')


def _copy_file(source: str | os.PathLike[str], target: Path) -> Path:
    """Copy ``source`` to ``target``, replacing the target atomically."""
    data = Path(source).read_bytes()
    fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(temp_name, target)
    except BaseException:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise
    return target


@dataclass
class ProjectInfo:
    """Name, project file path and folder of the open project."""

    name: str = ""
    path: str = ""
    folder: str = ""

    def _copy_into(self, subdir: str, source: str) -> Path:
        target = Path(f"{self.folder}/{subdir}/{source.split('/')[-1]}")
        return _copy_file(source, target)

    def copy_to_models(self, source: str) -> Path:
        """Copy a file into the project's Models folder."""
        return self._copy_into(MODELS_DIR, source)

    def copy_to_textures(self, source: str) -> Path:
        """Copy a file into the project's Textures folder."""
        return self._copy_into(TEXTURES_DIR, source)

    def copy_to_scripts(self, source: str) -> Path:
        """Copy a file into the project's Scripts folder."""
        return self._copy_into(SCRIPTS_DIR, source)

    def reset(self) -> None:
        """Forget the open project."""
        self.name = ""
        self.path = ""
        self.folder = ""


def can_create_project(path: str, name: str) -> bool:
    """True if a project called ``name`` may be created inside ``path``."""
    if not path or not name:
        return False
    directory = Path(path)
    if not directory.is_dir():
        return False
    if (directory / name).exists():
        return False
    return not any(char in _FORBIDDEN_NAME_CHARS for char in name)