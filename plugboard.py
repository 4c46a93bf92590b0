# plugboard.py
from __future__ import annotations

from collections.abc import Sequence
from typing import Dict, List, Tuple

from debug import Debug
from wheels import ALPHABET

debug = Debug()

Pair = Tuple[str, str]


class Plugboard:
    """Letter swaps applied on the way in and again on the way out.

    Every letter sits in at most one pair, so the mapping is its own
    inverse.
    """

    def __init__(self, pairs: Sequence[str | Pair] = ()) -> None:
        self.mapping: Dict[str, str] = {ch: ch for ch in ALPHABET}
        used: set[str] = set()

        for raw in pairs:
            # normalise to (a, b)
            if len(raw) != 2:
                raise ValueError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw

            if a == b:
                raise ValueError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ValueError(f"Letter {dup!r} already used in plugboard")
            if a not in ALPHABET or b not in ALPHABET:
                bad = a if a not in ALPHABET else b
                raise ValueError(f"Letter {bad!r} not in alphabet")

            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))

    def swap(self, letter: str) -> str:
        mapped = self.mapping[letter]
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    forward = swap        # alias: signal in
    backward = swap       # alias: signal out

    @property
    def pairs(self) -> List[str]:
        return [f"{a}{b}" for a, b in self.mapping.items() if a < b]

    def __len__(self) -> int:
        return len(self.pairs)

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
