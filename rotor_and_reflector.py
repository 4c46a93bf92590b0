# rotor_and_reflector.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from debug import Debug
from wheels import ALPHABET, REFLECTOR_WIRING, SIZE, RotorSpec

debug = Debug()


@dataclass(frozen=True, slots=True)
class Rotor:
    """One wheel of the machine.

    A rotor is a value: ``step()`` hands back the next rotor instead of
    moving this one, so whoever owns the wheel decides when state changes.
    """

    wiring: str
    notch: str
    ring_setting: int = 0
    position: int = 0

    # integer lookup tables
    _fwd: List[int] = field(init=False, repr=False, compare=False)
    _rev: List[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ValueError("wiring must be a permutation of alphabet")
        if len(self.notch) != 1 or self.notch not in ALPHABET:
            raise ValueError(f"Notch {self.notch!r} must be a single alphabet letter")
        if not (0 <= self.ring_setting < SIZE and 0 <= self.position < SIZE):
            raise ValueError(
                f"ring setting and position must be in 0–{SIZE - 1}, "
                f"got ring={self.ring_setting} pos={self.position}"
            )
        object.__setattr__(self, "_fwd", [ALPHABET.index(c) for c in self.wiring])
        object.__setattr__(self, "_rev", [self.wiring.index(c) for c in ALPHABET])

    @classmethod
    def from_spec(cls, spec: RotorSpec, ring_setting: int = 0, position: int = 0) -> "Rotor":
        return cls(spec.wiring, spec.notch, ring_setting, position)

    # ── stepping --------------------------------------------------
    def step(self) -> "Rotor":
        """Return this rotor advanced by one position."""
        nxt = replace(self, position=(self.position + 1) % SIZE)
        debug.log("rotor", f"{self.window}->{nxt.window}")
        return nxt

    def at_notch(self) -> bool:
        return ALPHABET[self.position] == self.notch

    @property
    def window(self) -> str:
        """Letter currently visible in the machine window."""
        return ALPHABET[self.position]

    # ── signal paths ---------------------------------------------
    def forward(self, letter: str) -> str:
        shift = (ALPHABET.index(letter) + self.position - self.ring_setting) % SIZE
        mapped = self._fwd[shift]
        return ALPHABET[(mapped - self.position + self.ring_setting) % SIZE]

    def backward(self, letter: str) -> str:
        shift = (ALPHABET.index(letter) + self.position - self.ring_setting) % SIZE
        mapped = self._rev[shift]
        return ALPHABET[(mapped - self.position + self.ring_setting) % SIZE]

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring_setting} notch={self.notch}>"


class Reflector:
    def __init__(self, wiring: str = REFLECTOR_WIRING) -> None:
        if len(wiring) != SIZE:
            raise ValueError("Reflector wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = ALPHABET.index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.wiring = wiring

    def reflect(self, letter: str) -> str:
        out = self.wiring[ALPHABET.index(letter)]
        debug.log("reflector", f"{letter}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
