from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    v = os.getenv(name, "").strip()
    return v or default


@dataclass(frozen=True)
class CodecConfig:
    """
    Codec runtime config (env-driven).

    Env is read on instantiation, not at import, so a fresh load_config()
    picks up overrides.

    The file part never carries the real audio filename: the endpoint sniffs
    the format from the bytes, so a fixed placeholder is sent.
    """

    # multipart "file" part
    file_filename: str = field(default_factory=lambda: _env("STTWIRE_FILE_FILENAME", "audio.m4a"))
    file_content_type: str = field(default_factory=lambda: _env("STTWIRE_FILE_CONTENT_TYPE", "audio/mpeg"))

    # Logging
    log_level: str = field(default_factory=lambda: _env("STTWIRE_LOG_LEVEL", "INFO").upper())


def load_config() -> CodecConfig:
    return CodecConfig()


__all__ = ["CodecConfig", "load_config"]
