from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Tuple

import httpx

from sttwire.config import CodecConfig, load_config
from sttwire.core.contracts import TranscriptionRequest
from sttwire.core.form.fields import FileField, FormPart, TextField
from sttwire.core.form.multipart import (
    TRANSCRIPTIONS_URL,
    MultipartBody,
    build_http_request,
    render_multipart,
)
from sttwire.core.wire_names import wire_name
from sttwire.utils.logger import get_logger

logger = get_logger("sttwire.encoder")


def _format_float(v: float) -> str:
    # repr() is the shortest round-trip form and ignores locale: 0.2 -> "0.2", 0 -> "0.0"
    return repr(float(v))


# Optional scalar fields in wire order. Each producer turns a present value into
# the text sent for it; absent (None) values are skipped before this is called.
_OPTIONAL_SCALARS: Tuple[Tuple[str, Callable[[Any], str]], ...] = (
    ("language", str),
    ("prompt", str),
    ("response_format", str),
    ("temperature", _format_float),
)


def _optional_scalar_parts(request: TranscriptionRequest) -> List[FormPart]:
    parts: List[FormPart] = []
    for attr, produce in _OPTIONAL_SCALARS:
        value = getattr(request, attr)
        if value is None:
            continue
        parts.append(TextField(name=wire_name(attr), value=produce(value)))
    return parts


def _granularity_parts(request: TranscriptionRequest) -> List[FormPart]:
    grans = request.timestamp_granularities
    if grans is None:
        return []
    name = wire_name("timestamp_granularities")
    return [TextField(name=name, value=g.value) for g in grans]


def encode_request(
    request: TranscriptionRequest,
    *,
    config: Optional[CodecConfig] = None,
) -> List[FormPart]:
    """
    Turn a TranscriptionRequest into ordered multipart form parts.

    Order: file, model, language, prompt, response_format, temperature, then one
    timestamp_granularities[] part per granularity in input order.
    """
    cfg = config or load_config()

    parts: List[FormPart] = [
        FileField(
            name=wire_name("file"),
            content=request.file,
            content_type=cfg.file_content_type,
            filename=cfg.file_filename,
        ),
        TextField(name=wire_name("model"), value=request.model),
    ]
    parts.extend(_optional_scalar_parts(request))
    parts.extend(_granularity_parts(request))

    logger.debug(
        "encoded transcription request: parts=%d audio_bytes=%d model=%s",
        len(parts),
        len(request.file),
        request.model,
    )
    return parts


def encode_multipart(
    request: TranscriptionRequest,
    *,
    boundary: Optional[str] = None,
    config: Optional[CodecConfig] = None,
) -> MultipartBody:
    return render_multipart(encode_request(request, config=config), boundary=boundary)


def encode_http_request(
    request: TranscriptionRequest,
    *,
    url: str = TRANSCRIPTIONS_URL,
    headers: Optional[Mapping[str, str]] = None,
    boundary: Optional[str] = None,
    config: Optional[CodecConfig] = None,
) -> httpx.Request:
    return build_http_request(
        encode_request(request, config=config),
        url=url,
        boundary=boundary,
        headers=headers,
    )


__all__ = ["encode_request", "encode_multipart", "encode_http_request"]
