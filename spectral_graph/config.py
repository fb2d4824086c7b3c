"""Configuration helpers for graph extraction."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple


@dataclass
class ExtractionConfig:
    """Knobs controlling which selected objects become vertices."""

    # padding around vertex boxes so strokes ending on the outline still hit
    vertex_margin: float = 5.0
    vertex_types: Tuple[str, ...] = ("group", "reference", "text")


_EXTRACTION_CONFIG = ExtractionConfig()


def get_extraction_config() -> ExtractionConfig:
    return copy.deepcopy(_EXTRACTION_CONFIG)


def set_extraction_config(config: ExtractionConfig) -> None:
    global _EXTRACTION_CONFIG
    _EXTRACTION_CONFIG = copy.deepcopy(config)
