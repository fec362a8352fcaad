"""Loading and lifetime management of resources kept in external files."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TypeVar

from PIL import Image

from starfighter.vector2 import Vector2

_ID_LIMIT = 1 << 16


class Resource(ABC):
    """Something loaded from a file and handed out by a ResourceManager."""

    def __init__(self) -> None:
        self.resource_id = 0
        self.resource_manager: ResourceManager | None = None

    @abstractmethod
    def load(self, path: str, manager: "ResourceManager") -> None:
        """Read the resource from path, raising OSError if it cannot be read."""

    def is_cloneable(self) -> bool:
        """Return True if every request for this resource gets its own copy."""
        return False

    def clone(self) -> "Resource":
        """Return a copy of the resource."""
        return copy.copy(self)

    def _release(self) -> None:
        """Drop whatever the resource holds; called when it is unloaded."""


R = TypeVar("R", bound=Resource)


class ResourceManager:
    """Loads resources, caches them by path and hands out ids."""

    def __init__(self) -> None:
        self.content_path = ""
        self._resources: dict[str, Resource] = {}
        self._clones: list[Resource] = []
        self._next_id = 0

    def set_content_path(self, path: str) -> None:
        """Set the folder prefix used for relative resource paths."""
        self.content_path = str(path)

    def unload_all(self) -> None:
        """Release every cached resource and every clone handed out."""
        for resource in self._resources.values():
            resource._release()
        self._resources.clear()
        for clone in self._clones:
            clone._release()
        self._clones.clear()

    def _take_id(self) -> int:
        resource_id = self._next_id
        self._next_id = (resource_id + 1) % _ID_LIMIT
        return resource_id

    def load(
        self,
        resource_type: type[R],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> R:
        """Load a resource of the given type, reusing a cached one when present.

        A cached cloneable resource is cloned for each request. Loading
        failures raise the error of the resource's own load method.
        """
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, resource_type):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, "
                    f"not a {resource_type.__name__}"
                )
            if cached.is_cloneable():
                clone = cached.clone()
                clone.resource_id = self._take_id()
                self._clones.append(clone)
                return clone  # type: ignore[return-value]
            return cached

        resource = resource_type()
        resource.resource_manager = self
        full_path = self.content_path + path if append_content_path else path
        resource.load(full_path, self)
        if cache:
            self._resources[path] = resource
        resource.resource_id = self._take_id()
        return resource


class Texture(Resource):
    """A two-dimensional grid of texels loaded from an image file."""

    def __init__(self) -> None:
        super().__init__()
        self.image: Image.Image | None = None
        self.width = 0
        self.height = 0

    def load(self, path: str, manager: ResourceManager) -> None:
        """Read the image at path and take its dimensions."""
        with Image.open(path) as image:
            image.load()
        self.image = image
        self.set_size(image.width, image.height)

    def set_size(self, width: int, height: int) -> None:
        """Set the dimensions of the texture in pixels."""
        self.width = width
        self.height = height

    @property
    def size(self) -> Vector2:
        """The dimensions of the texture."""
        return Vector2(self.width, self.height)

    @property
    def center(self) -> Vector2:
        """The centre point of the texture."""
        return self.size / 2

    def is_cloneable(self) -> bool:
        """Textures are shared, never cloned."""
        return False

    def _release(self) -> None:
        self.image = None