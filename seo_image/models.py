"""Image record variants decoded from a page's ``image`` front matter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class NoImage:
    """The page declares no usable image."""

    def get(self, key: str, default: Any = None) -> Any:
        return default

    def as_dict(self) -> Dict[str, Any]:
        return {"path": None}


@dataclass(frozen=True)
class StringImage:
    """``image: photo.jpg`` - the value is the path itself."""

    path: str

    def get(self, key: str, default: Any = None) -> Any:
        if key == "path":
            return self.path
        return default

    def as_dict(self) -> Dict[str, Any]:
        return {"path": self.path}


@dataclass(frozen=True)
class StructuredImage:
    """``image:`` given as a mapping (path, facebook, twitter, alt, ...)."""

    data: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)


ImageRecord = Union[NoImage, StringImage, StructuredImage]


def is_present(value: Any) -> bool:
    """Front matter treats both null and false as unset."""
    return value is not None and value is not False


def normalize_image(value: Any) -> ImageRecord:
    """Decode a raw ``image`` value into one of the record variants.

    Mappings are copied and always carry a ``path`` key, defaulting to None.
    """
    if isinstance(value, Mapping):
        data: Dict[str, Any] = {"path": None}
        data.update(value)
        return StructuredImage(data)
    if isinstance(value, str):
        return StringImage(value)
    return NoImage()
