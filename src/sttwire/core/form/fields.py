from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FileField:
    """Binary multipart part (name + bytes + content-type + filename)."""
    name: str
    content: bytes
    content_type: str
    filename: str


@dataclass(frozen=True)
class TextField:
    name: str
    value: str


FormPart = Union[FileField, TextField]


__all__ = ["FileField", "TextField", "FormPart"]
