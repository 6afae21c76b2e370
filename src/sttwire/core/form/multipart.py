from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import httpx

from .fields import FileField, FormPart, TextField

TRANSCRIPTIONS_URL = "https://api.openai.com/v1/audio/transcriptions"

# httpx "files" entry: (field name, (filename, content, content type))
_HttpxFile = Tuple[str, Tuple[str, bytes, str]]


@dataclass(frozen=True)
class MultipartBody:
    boundary: str
    body: bytes

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"


def new_boundary() -> str:
    return f"sttwire-{uuid.uuid4().hex}"


def _to_httpx_form(parts: Iterable[FormPart]) -> Tuple[Dict[str, List[str]], List[_HttpxFile]]:
    # Repeated text names (timestamp_granularities[]) become one list value;
    # httpx writes one part per list item, in order.
    data: Dict[str, List[str]] = {}
    files: List[_HttpxFile] = []
    for part in parts:
        if isinstance(part, FileField):
            files.append((part.name, (part.filename, part.content, part.content_type)))
        elif isinstance(part, TextField):
            data.setdefault(part.name, []).append(part.value)
        else:
            raise TypeError(f"unsupported form part: {type(part).__name__}")
    if not files:
        # without a file httpx falls back to urlencoded
        raise ValueError("multipart body needs at least one file part")
    return data, files


def build_http_request(
    parts: Iterable[FormPart],
    *,
    url: str = TRANSCRIPTIONS_URL,
    boundary: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> httpx.Request:
    """
    Build an unsent httpx POST carrying the parts as multipart/form-data.

    The boundary is pinned through the Content-Type header, so a fixed boundary
    gives a reproducible body. Sending (and auth headers) is up to the caller's
    httpx client: client.send(req).
    """
    data, files = _to_httpx_form(parts)
    b = boundary or new_boundary()

    hdrs = dict(headers or {})
    hdrs["Content-Type"] = f"multipart/form-data; boundary={b}"
    return httpx.Request("POST", url, data=data, files=files, headers=hdrs)


def render_multipart(parts: Iterable[FormPart], *, boundary: Optional[str] = None) -> MultipartBody:
    """
    Serialize form parts into a multipart/form-data body.

    httpx writes text parts first (in order), then file parts.
    """
    b = boundary or new_boundary()
    req = build_http_request(parts, boundary=b)
    return MultipartBody(boundary=b, body=req.read())


__all__ = [
    "TRANSCRIPTIONS_URL",
    "MultipartBody",
    "new_boundary",
    "build_http_request",
    "render_multipart",
]
