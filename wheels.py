# wheels.py
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict, Tuple

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)


@dataclass(frozen=True, slots=True)
class RotorSpec:
    """Catalog entry: a named wiring and the letter of its single notch."""

    name: str
    wiring: str
    notch: str


# ── rotor catalog (index order is the default left/middle/right) ──
ROTOR_SPECS: Tuple[RotorSpec, ...] = (
    RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
)

DEFAULT_ORDER: Tuple[int, int, int] = (0, 1, 2)

# UKW-B
REFLECTOR_WIRING = "YRUHQSLDPXNGOKMIEBFZCWVJAT"

ROTOR_INDEX: Dict[str, int] = {spec.name: i for i, spec in enumerate(ROTOR_SPECS)}
