# validation.py
from __future__ import annotations

import re
from enum import Enum
from typing import List, Set, Tuple

from debug import Debug
from wheels import DEFAULT_ORDER, ROTOR_INDEX

debug = Debug()

# ────────────────────────────────────────────────────────────────────────
#  0. Error kinds
# ────────────────────────────────────────────────────────────────────────


class ErrorKind(Enum):
    FORMAT = "format"
    RANGE = "range"
    PLUGBOARD_CONFLICT = "plugboard_conflict"


class ValidationError(ValueError):
    """Bad operator input. ``kind`` says what went wrong, ``offending``
    holds the tokens that caused it."""

    def __init__(self, kind: ErrorKind, message: str, offending: tuple = ()) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.offending = offending

    def __repr__(self) -> str:
        return f"ValidationError({self.kind.name}, {self.message!r})"


# ────────────────────────────────────────────────────────────────────────
#  1. Regex & trivial helpers
# ────────────────────────────────────────────────────────────────────────

_three_numbers_re = re.compile(r"^[0-9]+\s+[0-9]+\s+[0-9]+$")
_pairs_re = re.compile(r"^([A-Z]{2}\s*)+$")
_pair_re = re.compile(r"[A-Z]{2}")
MAX_VALUE = 25


def _parse_triplet(text: str, what: str, label: str) -> Tuple[int, int, int]:
    raw = text.strip()
    if not raw:
        raise ValidationError(ErrorKind.FORMAT, f"Please enter three {what} (e.g. 0 0 0)")
    if not _three_numbers_re.match(raw):
        raise ValidationError(
            ErrorKind.FORMAT,
            "Please enter exactly three numbers separated by spaces (e.g. 0 0 0)",
            (raw,),
        )

    values = [int(item) for item in raw.split()]
    bad = [(i, v) for i, v in enumerate(values, 1) if not 0 <= v <= MAX_VALUE]
    if bad:
        listed = ", ".join(f"{label} {i} ({v})" for i, v in bad)
        raise ValidationError(
            ErrorKind.RANGE,
            f"Invalid {what}: {listed} must be between 0 and {MAX_VALUE}",
            tuple(v for _, v in bad),
        )

    debug.log("validation", f"{what} -> {values}")
    return values[0], values[1], values[2]


# ────────────────────────────────────────────────────────────────────────
#  2. Public parsers
# ────────────────────────────────────────────────────────────────────────


def parse_rotor_positions(text: str) -> Tuple[int, int, int]:
    return _parse_triplet(text, "rotor positions", "position")


def parse_ring_settings(text: str) -> Tuple[int, int, int]:
    return _parse_triplet(text, "ring settings", "setting")


def parse_plugboard_pairs(text: str) -> List[Tuple[str, str]]:
    """Return validated plugboard pairs; blank input means no cables."""
    raw = text.strip().upper()
    if not raw:
        return []

    if not _pairs_re.match(raw):
        raise ValidationError(
            ErrorKind.FORMAT,
            "Please enter pairs of letters separated by spaces (e.g. AB CD)",
            (raw,),
        )

    pairs = [(p[0], p[1]) for p in _pair_re.findall(raw)]
    used: Set[str] = set()
    for a, b in pairs:
        if a == b:
            raise ValidationError(
                ErrorKind.PLUGBOARD_CONFLICT,
                f"Invalid plugboard pair: {a}{b} - cannot connect a letter to itself",
                (a + b,),
            )
        if {a, b} & used:
            dup = a if a in used else b
            raise ValidationError(
                ErrorKind.PLUGBOARD_CONFLICT,
                f"Invalid plugboard pair: letter {dup} is already used in another pair",
                (dup,),
            )
        used.update((a, b))

    debug.log("validation", f"plugboard -> {pairs}")
    return pairs


def parse_rotor_order(text: str) -> Tuple[int, int, int]:
    """Map three rotor names (``"III I II"``) to catalog indices."""
    names = text.strip().upper().split()
    if not names:
        return DEFAULT_ORDER
    if len(names) != 3:
        raise ValidationError(
            ErrorKind.FORMAT,
            f"Please enter exactly three rotor names from {' '.join(ROTOR_INDEX)}",
            tuple(names),
        )
    unknown = [n for n in names if n not in ROTOR_INDEX]
    if unknown:
        raise ValidationError(
            ErrorKind.FORMAT,
            f"Unknown rotor(s): {', '.join(unknown)}",
            tuple(unknown),
        )
    if len(set(names)) != 3:
        dup = next(n for n in names if names.count(n) > 1)
        raise ValidationError(ErrorKind.FORMAT, f"Rotor {dup} used more than once", (dup,))

    ids = [ROTOR_INDEX[n] for n in names]
    return ids[0], ids[1], ids[2]
