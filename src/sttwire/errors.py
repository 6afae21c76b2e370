from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(eq=False)
class SttWireError(Exception):
    """
    Typed codec error carrying a stable machine-readable code.
    """

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(eq=False)
class DecodeError(SttWireError):
    """
    A transcription response could not be decoded.

    `path` points at the first offending field ("text", "segments[1].seek",
    "$" for the payload root). `errors` lists every failing field.
    """

    path: str = "$"
    errors: List[Dict[str, str]] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.code} at {self.path}: {self.message}"


class MissingFieldError(DecodeError):
    def __init__(
        self,
        path: str,
        message: str = "required field is missing",
        *,
        errors: Optional[List[Dict[str, str]]] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            code="missing_field",
            message=message,
            details=details,
            path=path,
            errors=list(errors or [{"path": path, "code": "missing_field", "message": message}]),
        )


class TypeMismatchError(DecodeError):
    def __init__(
        self,
        path: str,
        message: str = "field has the wrong type",
        *,
        errors: Optional[List[Dict[str, str]]] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            code="type_mismatch",
            message=message,
            details=details,
            path=path,
            errors=list(errors or [{"path": path, "code": "type_mismatch", "message": message}]),
        )


__all__ = [
    "SttWireError",
    "DecodeError",
    "MissingFieldError",
    "TypeMismatchError",
]
