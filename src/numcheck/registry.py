"""
Lookup of identifier modules by name.

Each registered module exposes the same surface: ``NAME``, ``LOCAL_NAME``,
``ABBREVIATION``, ``compact``, ``format`` and ``validate``. Callers (the CLI,
the regex backend) pick one by its dotted name such as ``"th.idnr"`` or by
its abbreviation.
"""

from __future__ import annotations

from types import ModuleType
from typing import Dict, List

from .exceptions import UnknownValidator
from .th import idnr

_VALIDATORS: Dict[str, ModuleType] = {
    "th.idnr": idnr,
}


def _aliases() -> Dict[str, ModuleType]:
    out = dict(_VALIDATORS)
    for mod in _VALIDATORS.values():
        out.setdefault(mod.ABBREVIATION.lower(), mod)
    return out


def get_validator(name: str) -> ModuleType:
    """Return the module registered as ``name`` (case-insensitive)."""
    mod = _aliases().get(name.strip().lower())
    if mod is None:
        raise UnknownValidator(name)
    return mod


def available() -> List[str]:
    return sorted(_VALIDATORS)
