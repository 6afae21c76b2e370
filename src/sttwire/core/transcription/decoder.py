from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Sequence, Union

from pydantic import ValidationError

from sttwire.core_types import TranscriptionResult
from sttwire.errors import DecodeError, MissingFieldError, TypeMismatchError
from sttwire.utils.logger import get_logger

logger = get_logger("sttwire.decoder")

JsonPayload = Union[Mapping[str, Any], bytes, bytearray, str]

ROOT_PATH = "$"


def _loc_to_path(loc: Sequence[Union[str, int]]) -> str:
    """('segments', 1, 'seek') -> 'segments[1].seek'"""
    path = ""
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
        elif path:
            path += f".{item}"
        else:
            path = str(item)
    return path or ROOT_PATH


def _error_entries(e: ValidationError) -> List[Dict[str, str]]:
    entries: List[Dict[str, str]] = []
    for err in e.errors():
        code = "missing_field" if err.get("type") == "missing" else "type_mismatch"
        entries.append(
            {
                "path": _loc_to_path(err.get("loc", ())),
                "code": code,
                "message": str(err.get("msg", "")),
            }
        )
    return entries


def _to_decode_error(e: ValidationError) -> DecodeError:
    entries = _error_entries(e)
    first = entries[0]
    if first["code"] == "missing_field":
        return MissingFieldError(first["path"], first["message"], errors=entries)
    return TypeMismatchError(first["path"], first["message"], errors=entries)


def _rejected(err: DecodeError) -> DecodeError:
    logger.warning(
        "transcription response rejected: %s at %s (%d field error(s))",
        err.code,
        err.path,
        len(err.errors),
    )
    return err


def _load_json(raw: Union[bytes, bytearray, str]) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise _rejected(TypeMismatchError(ROOT_PATH, f"payload is not valid JSON: {e}")) from e


def decode_response(payload: JsonPayload) -> TranscriptionResult:
    """
    Decode a create-transcription JSON response (json or verbose_json shape).

    Accepts an already-parsed JSON object or the raw body. Any bad field fails
    the whole response; there is no partial result.

    Raises:
        MissingFieldError: a required key is absent ("text", "segments[0].seek", ...)
        TypeMismatchError: a key is present with the wrong kind, or the payload
            itself is not a JSON object
    """
    data = _load_json(payload) if isinstance(payload, (bytes, bytearray, str)) else payload

    if not isinstance(data, Mapping):
        raise _rejected(TypeMismatchError(ROOT_PATH, f"expected a JSON object, got {type(data).__name__}"))

    try:
        result = TranscriptionResult.model_validate(dict(data))
    except ValidationError as e:
        raise _rejected(_to_decode_error(e)) from e

    logger.debug(
        "decoded transcription response: language=%s duration=%s words=%d segments=%d",
        result.language,
        result.duration,
        len(result.words or []),
        len(result.segments or []),
    )
    return result


__all__ = ["JsonPayload", "decode_response"]
