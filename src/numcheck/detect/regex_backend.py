"""
Regex-based detection of identifier numbers in free text.

What this does
--------------
- Loads YAML "rule packs" (one per country) that define candidate patterns.
- Compiles those patterns and applies optional **normalizers** (e.g., strip
  spaces and dashes) and **validators** (the registered identifier modules).
- Emits `Span` records only for candidates whose checksum holds.

A bare digit pattern matches phone numbers, order ids and the like; gating
every match on the identifier's own checksum keeps the output precise.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from importlib import resources
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from ..exceptions import UnknownValidator
from ..registry import get_validator
from ..util.strings import clean

logger = logging.getLogger(__name__)

_RULESETS_PKG = "numcheck.detect.rulesets"


# ---- Data model returned to the pipeline -------------------------------------------------

@dataclass
class Span:
    """
    A detected identifier in text.

    Attributes:
        start: Start character offset (inclusive).
        end:   End character offset (exclusive).
        text:  Raw matched text slice (pre-normalization).
        type:  Rule type (e.g., 'TH_IDNR').
        compact: Normalized form that passed validation.
        confidence: Rule-assigned confidence.
    """
    start: int
    end: int
    text: str
    type: str
    compact: str
    confidence: float


# ---- Registry of named normalizers -------------------------------------------------------

def _strip_spaces_dashes(s: str) -> str:
    return clean(s, " -")


_NORMALIZERS: Dict[str, Callable[[str], str]] = {
    "strip_spaces_dashes": _strip_spaces_dashes,
}


# ---- Backend -----------------------------------------------------------------------------

class RegexBackend:
    """
    Load rule packs and run compiled regex against input text.

    Rule packs live under `numcheck/detect/rulesets/`. Each rule can specify:
      - regex:       the pattern string
      - flags:       optional list of flags ["I", "M", "S"]
      - normalize:   names of normalizers to apply before validation
      - validators:  registered identifier names (e.g. "th.idnr") that must accept the match
      - confidence:  float score assigned to matches from this rule
      - type:        override the emitted type (defaults to YAML key)
    """

    def __init__(self, use_th: bool = True) -> None:
        self.rules: List[Tuple[str, re.Pattern, Dict[str, Any]]] = []

        packs: List[str] = []
        if use_th:
            packs.append("th.yaml")

        for fname in packs:
            text = resources.files(_RULESETS_PKG).joinpath(fname).read_text(encoding="utf-8")
            data = yaml.safe_load(text) or {}
            for key, rule in (data.get("patterns", {}) or {}).items():
                compiled = self._compile_rule(key, rule)
                if compiled:
                    self.rules.append(compiled)

    # -- Compilation helpers ----------------------------------------------------------------

    def _compile_rule(
        self, key: str, rule: Any
    ) -> Optional[Tuple[str, re.Pattern, Dict[str, Any]]]:
        """
        Turn a YAML rule into a compiled regex and a metadata dict.

        Rules must be mappings with a 'regex' field; anything else is skipped.
        Validator names are resolved up front so a typo in a pack fails loudly.
        """
        if not isinstance(rule, dict) or "regex" not in rule:
            logger.warning("Skipping malformed rule %s", key)
            return None

        flags = 0
        for f in rule.get("flags", ["I"]):
            if f == "I":
                flags |= re.I
            elif f == "M":
                flags |= re.M
            elif f == "S":
                flags |= re.S

        pat = re.compile(rule["regex"], flags)

        validators = []
        for name in rule.get("validators", []):
            try:
                validators.append(get_validator(name))
            except UnknownValidator:
                raise ValueError(f"Rule {key} names unknown validator {name!r}") from None

        meta = {
            "type": rule.get("type", key),
            "validators": validators,
            "normalize": rule.get("normalize", []),
            "confidence": float(rule.get("confidence", 0.99)),
        }
        return key, pat, meta

    # -- Execution helpers ------------------------------------------------------------------

    def _apply_normalizers(self, text: str, names: List[str]) -> str:
        """Apply 0..N normalizers in order. Unknown names are ignored."""
        for n in names:
            func = _NORMALIZERS.get(n)
            if func:
                text = func(text)
        return text

    @staticmethod
    def _validators_ok(text: str, validators: List[Any]) -> bool:
        return all(mod.validate(text).is_valid for mod in validators)

    # -- Public API -------------------------------------------------------------------------

    def detect(self, text: str) -> List[Span]:
        """
        Run all compiled rules against the input text.

        Order of operations per match:
          1) regex match -> raw substring
          2) normalize   -> e.g., strip spaces/dashes
          3) validate    -> drop the candidate if any validator rejects it
          4) emit Span   -> raw slice plus the compact form
        """
        spans: List[Span] = []

        for _, pat, meta in self.rules:
            for m in pat.finditer(text):
                raw = m.group(0)
                norm = self._apply_normalizers(raw, meta["normalize"])

                if not self._validators_ok(norm, meta["validators"]):
                    continue

                spans.append(
                    Span(
                        start=m.start(),
                        end=m.end(),
                        text=raw,
                        type=meta["type"],
                        compact=norm,
                        confidence=meta["confidence"],
                    )
                )

        logger.debug("regex backend: %d span(s) in %d chars", len(spans), len(text))
        return spans
