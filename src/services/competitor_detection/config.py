"""
Configuration for competitor detection.

``DetectionConfig`` is an immutable snapshot of the tuning knobs in
``config.settings``; the detector, gazetteer and NER fallback receive it
explicitly instead of reading settings at call time.
"""

from dataclasses import dataclass

from config import Settings, settings


@dataclass(frozen=True)
class DetectionConfig:
    max_competitors: int = 20
    enable_ner_fallback: bool = True
    ner_max_candidates: int = 15
    ner_text_limit: int = 2000
    ner_timeout_seconds: float = 15.0
    history_window_days: int = 90
    history_min_mentions: int = 3
    history_row_limit: int = 200
    history_top_n: int = 50

    @classmethod
    def from_settings(cls, source: Settings = settings) -> "DetectionConfig":
        return cls(
            max_competitors=source.max_competitors,
            enable_ner_fallback=source.enable_ner_fallback,
            ner_max_candidates=source.ner_max_candidates,
            ner_text_limit=source.ner_text_limit,
            ner_timeout_seconds=source.ner_timeout_seconds,
            history_window_days=source.history_window_days,
            history_min_mentions=source.history_min_mentions,
            history_row_limit=source.history_row_limit,
            history_top_n=source.history_top_n,
        )
