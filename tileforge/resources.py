"""Loading and sharing of resources keyed by file path."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ResourceLoadError(Exception):
    """Raised when a resource cannot be loaded from its file."""


class ResourceAllocator(Generic[T]):
    """Loads each file once and hands out integer ids for the results."""

    def __init__(self, loader: Callable[[str], T | None]) -> None:
        self._loader = loader
        self._resources: dict[int, tuple[str, T]] = {}
        self._next_id = 0

    def add(self, file_path: str) -> int:
        """Return the id for the file, loading it if not already loaded."""
        for resource_id, (path, _) in self._resources.items():
            if path == file_path:
                return resource_id
        try:
            resource = self._loader(file_path)
        except Exception as exc:
            raise ResourceLoadError(f"cannot load {file_path!r}: {exc}") from exc
        if resource is None:
            raise ResourceLoadError(f"cannot load {file_path!r}")
        resource_id = self._next_id
        self._resources[resource_id] = (file_path, resource)
        self._next_id += 1
        return resource_id

    def remove(self, resource_id: int) -> None:
        self._resources.pop(resource_id, None)

    def get(self, resource_id: int) -> T | None:
        entry = self._resources.get(resource_id)
        return None if entry is None else entry[1]

    def has(self, resource_id: int) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)