from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from typing import List, Optional

from sttwire.core.wire_names import wire_name

# Response-side models. Wire keys come from the shared rename table; integers
# and reals are kept apart (seek/tokens reject 1.5, "1" and true).
_WIRE_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=wire_name,
    populate_by_name=True,
)


class Word(BaseModel):
    model_config = _WIRE_MODEL_CONFIG

    word: StrictStr
    start: StrictFloat
    end: StrictFloat


class Segment(BaseModel):
    """
    One verbose_json segment.

    avg_logprob < -1 means the logprobs failed; compression_ratio > 2.4 means
    compression failed. Neither is validated here.
    """

    model_config = _WIRE_MODEL_CONFIG

    seek: StrictInt
    start: StrictFloat
    end: StrictFloat
    text: StrictStr
    tokens: List[StrictInt]
    temperature: StrictFloat
    avg_logprob: StrictFloat
    compression_ratio: StrictFloat
    no_speech_prob: StrictFloat

    @property
    def logprob_failed(self) -> bool:
        return self.avg_logprob < -1.0

    @property
    def compression_failed(self) -> bool:
        return self.compression_ratio > 2.4

    def is_silent(self, threshold: float = 1.0) -> bool:
        return self.no_speech_prob > threshold and self.logprob_failed


class TranscriptionResult(BaseModel):
    """
    Decoded transcription response.

    `json` responses only carry `text`; `verbose_json` adds language/duration
    and, depending on the requested timestamp granularities, words/segments.
    """

    model_config = _WIRE_MODEL_CONFIG

    text: StrictStr
    language: Optional[StrictStr] = None
    duration: Optional[StrictFloat] = None
    words: Optional[List[Word]] = None
    segments: Optional[List[Segment]] = None

    @property
    def has_word_timestamps(self) -> bool:
        return bool(self.words)

    @property
    def has_segment_timestamps(self) -> bool:
        return bool(self.segments)


__all__ = ["Word", "Segment", "TranscriptionResult"]
