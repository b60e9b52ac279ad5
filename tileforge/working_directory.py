"""Location of the game's resource files."""

from __future__ import annotations

import os


class WorkingDirectory:
    """The directory resource file names are resolved against."""

    def __init__(self, path: str | os.PathLike[str] = "./") -> None:
        self.path = os.fspath(path)

    def resolve(self, name: str) -> str:
        """Return the path of a resource file within the directory."""
        return os.path.join(self.path, name)

    def __str__(self) -> str:
        return self.path