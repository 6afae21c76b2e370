from __future__ import annotations

import httpx
import pytest

from sttwire.core.form.fields import FileField, TextField
from sttwire.core.form.multipart import TRANSCRIPTIONS_URL, build_http_request, new_boundary, render_multipart

AUDIO_PART = FileField(name="file", content=b"\x00\x01RIFF", content_type="audio/mpeg", filename="audio.m4a")


def test_render_text_and_file_parts() -> None:
    mp = render_multipart([AUDIO_PART, TextField(name="model", value="whisper-1")], boundary="BOUNDARY")

    # httpx writes text fields before files
    assert mp.body == (
        b"--BOUNDARY\r\n"
        b'Content-Disposition: form-data; name="model"\r\n'
        b"\r\n"
        b"whisper-1\r\n"
        b"--BOUNDARY\r\n"
        b'Content-Disposition: form-data; name="file"; filename="audio.m4a"\r\n'
        b"Content-Type: audio/mpeg\r\n"
        b"\r\n"
        b"\x00\x01RIFF\r\n"
        b"--BOUNDARY--\r\n"
    )
    assert mp.boundary == "BOUNDARY"
    assert mp.content_type == "multipart/form-data; boundary=BOUNDARY"


def test_repeated_names_keep_order() -> None:
    parts = [
        AUDIO_PART,
        TextField(name="timestamp_granularities[]", value="word"),
        TextField(name="timestamp_granularities[]", value="segment"),
    ]
    body = render_multipart(parts, boundary="b").body

    assert body.count(b'name="timestamp_granularities[]"') == 2
    assert body.index(b"\r\nword\r\n") < body.index(b"\r\nsegment\r\n")


def test_text_is_utf8_encoded() -> None:
    body = render_multipart([AUDIO_PART, TextField(name="prompt", value="größe 音声")], boundary="b").body
    assert "größe 音声".encode("utf-8") in body


def test_fixed_boundary_is_reproducible() -> None:
    parts = [AUDIO_PART, TextField(name="model", value="m")]
    assert render_multipart(parts, boundary="b").body == render_multipart(parts, boundary="b").body


def test_generated_boundaries_are_unique() -> None:
    assert new_boundary() != new_boundary()

    mp = render_multipart([AUDIO_PART])
    assert mp.boundary.startswith("sttwire-")
    assert mp.body.endswith(f"--{mp.boundary}--\r\n".encode("ascii"))


def test_build_http_request_pins_boundary_and_keeps_headers() -> None:
    req = build_http_request(
        [AUDIO_PART, TextField(name="model", value="whisper-1")],
        boundary="xyz",
        headers={"Authorization": "Bearer sk-test"},
    )

    assert isinstance(req, httpx.Request)
    assert req.method == "POST"
    assert str(req.url) == TRANSCRIPTIONS_URL
    assert req.headers["Content-Type"] == "multipart/form-data; boundary=xyz"
    assert req.headers["Authorization"] == "Bearer sk-test"
    assert req.read() == render_multipart([AUDIO_PART, TextField(name="model", value="whisper-1")], boundary="xyz").body


def test_text_only_parts_are_rejected() -> None:
    with pytest.raises(ValueError):
        render_multipart([TextField(name="model", value="m")], boundary="b")


def test_unknown_part_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        render_multipart([AUDIO_PART, ("model", "m")], boundary="b")  # type: ignore[list-item]
