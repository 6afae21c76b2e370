from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Sequence, Tuple, Union, get_args

ResponseFormat = Literal["json", "text", "srt", "verbose_json", "vtt"]

RESPONSE_FORMATS: Tuple[str, ...] = get_args(ResponseFormat)


class TimestampGranularity(str, Enum):
    WORD = "word"
    SEGMENT = "segment"


@dataclass(frozen=True)
class TranscriptionRequest:
    """
    Create-transcription request body.

    `file` holds the raw audio bytes (flac, mp3, mp4, mpeg, mpga, m4a, ogg, wav
    or webm), not a filename. Optional fields left as None are not sent.

    timestamp_granularities only has an effect with response_format="verbose_json".
    Segment timestamps are free; word timestamps add latency upstream.
    """

    # Required
    file: bytes
    model: str

    # Optional
    language: Optional[str] = None  # ISO-639-1
    prompt: Optional[str] = None
    response_format: Optional[ResponseFormat] = None
    temperature: Optional[float] = None  # 0..1; 0 lets the server pick
    timestamp_granularities: Optional[Sequence[Union[TimestampGranularity, str]]] = None

    def __post_init__(self) -> None:
        # frozen dataclass: normalize via object.__setattr__
        if isinstance(self.file, (bytearray, memoryview)):
            object.__setattr__(self, "file", bytes(self.file))

        if self.response_format is not None and self.response_format not in RESPONSE_FORMATS:
            raise ValueError(
                f"response_format must be one of {', '.join(RESPONSE_FORMATS)}; got {self.response_format!r}"
            )

        if self.timestamp_granularities is not None:
            if isinstance(self.timestamp_granularities, str):
                raise ValueError("timestamp_granularities must be a sequence, not a single string")
            grans = tuple(TimestampGranularity(g) for g in self.timestamp_granularities)
            object.__setattr__(self, "timestamp_granularities", grans)


__all__ = [
    "ResponseFormat",
    "RESPONSE_FORMATS",
    "TimestampGranularity",
    "TranscriptionRequest",
]
