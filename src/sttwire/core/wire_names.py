from __future__ import annotations

from typing import Dict

# attribute name -> name expected by the transcription endpoint.
# Attributes not listed here go over the wire under their own name.
WIRE_NAMES: Dict[str, str] = {
    # repeated multipart key
    "timestamp_granularities": "timestamp_granularities[]",
    "response_format": "response_format",
    # verbose_json segment fields
    "avg_logprob": "avg_logprob",
    "compression_ratio": "compression_ratio",
    "no_speech_prob": "no_speech_prob",
}


def wire_name(attr: str) -> str:
    return WIRE_NAMES.get(attr, attr)


__all__ = ["WIRE_NAMES", "wire_name"]
