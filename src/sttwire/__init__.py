# src/sttwire/__init__.py
from __future__ import annotations

from sttwire.config import CodecConfig, load_config
from sttwire.core.contracts import ResponseFormat, TimestampGranularity, TranscriptionRequest
from sttwire.core.form.fields import FileField, FormPart, TextField
from sttwire.core.form.multipart import MultipartBody, build_http_request, render_multipart
from sttwire.core.transcription.decoder import decode_response
from sttwire.core.transcription.encoder import encode_http_request, encode_multipart, encode_request
from sttwire.core_types import Segment, TranscriptionResult, Word
from sttwire.errors import DecodeError, MissingFieldError, SttWireError, TypeMismatchError

__all__ = [
    "CodecConfig",
    "load_config",
    "ResponseFormat",
    "TimestampGranularity",
    "TranscriptionRequest",
    "FileField",
    "TextField",
    "FormPart",
    "MultipartBody",
    "render_multipart",
    "build_http_request",
    "encode_request",
    "encode_multipart",
    "encode_http_request",
    "decode_response",
    "Word",
    "Segment",
    "TranscriptionResult",
    "SttWireError",
    "DecodeError",
    "MissingFieldError",
    "TypeMismatchError",
]
