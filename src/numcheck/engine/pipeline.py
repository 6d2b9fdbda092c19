"""
Runs the enabled detectors over text and collects their spans.
"""

from __future__ import annotations

from typing import List

from ..config import NumcheckConfig
from ..detect.regex_backend import RegexBackend, Span


class Pipeline:
    """
    Orchestrates detectors configured in `NumcheckConfig` and drops spans
    below the confidence floor.
    """

    def __init__(self, cfg: NumcheckConfig) -> None:
        self.cfg = cfg

        # --- Backends (toggle via config) ---
        self.regex = (
            RegexBackend(use_th=cfg.detectors.regex_packs.th)
            if cfg.detectors.regex
            else None
        )

    # ---------------- Public API ----------------

    def scan_text(self, text: str) -> List[Span]:
        """Run all enabled detectors on a single string; spans come back ordered by offset."""
        spans: List[Span] = []
        if self.regex:
            spans.extend(self.regex.detect(text))
        floor = self.cfg.detectors.min_confidence
        return sorted((s for s in spans if s.confidence >= floor), key=lambda s: (s.start, s.end))
