# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Tuple

from debug import Debug
from plugboard import Pair, Plugboard
from rotor_and_reflector import Reflector, Rotor
from wheels import ALPHABET, DEFAULT_ORDER, ROTOR_SPECS

if TYPE_CHECKING:
    from settings import MachineSettings

debug = Debug()


class Machine:
    """Three rotors, a fixed reflector and a plugboard.

    Encryption and decryption are the same call: a second machine built
    with identical parameters turns the ciphertext back into plaintext.
    A machine keeps stepping across ``process`` calls, so use a fresh
    one for every independent message.
    """

    def __init__(
        self,
        rotor_ids: Sequence[int] = DEFAULT_ORDER,
        positions: Sequence[int] = (0, 0, 0),
        ring_settings: Sequence[int] = (0, 0, 0),
        plugboard: Plugboard | Sequence[str | Pair] = (),
    ) -> None:
        if not (len(rotor_ids) == len(positions) == len(ring_settings) == 3):
            raise ValueError("exactly three rotors, positions and ring settings are required")
        for rid in rotor_ids:
            if not 0 <= rid < len(ROTOR_SPECS):
                raise ValueError(f"Unknown rotor id {rid}")

        self.rotors: Tuple[Rotor, Rotor, Rotor] = tuple(
            Rotor.from_spec(ROTOR_SPECS[rid], ring, pos)
            for rid, pos, ring in zip(rotor_ids, positions, ring_settings)
        )
        self.plugboard = plugboard if isinstance(plugboard, Plugboard) else Plugboard(plugboard)
        self.reflector = Reflector()

    @classmethod
    def from_settings(cls, settings: "MachineSettings") -> "Machine":
        return cls(
            settings.rotor_ids,
            settings.positions,
            settings.ring_settings,
            settings.plugs,
        )

    @property
    def positions(self) -> Tuple[int, int, int]:
        return tuple(r.position for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance rotors for one key-press, double step included."""
        left, middle, right = self.rotors

        # decide which rotors step before any of them moves
        step_L = middle.at_notch()
        step_M = step_L or right.at_notch()

        if step_L:
            left = left.step()
        if step_M:
            middle = middle.step()
        right = right.step()

        self.rotors = (left, middle, right)
        debug.log("stepping", "".join(r.window for r in self.rotors))

    # ── encipher one letter  ────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        if len(letter) != 1 or letter not in ALPHABET:
            return letter

        self.step_rotors()

        signal = self.plugboard.forward(letter)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        out = self.plugboard.backward(signal)
        debug.log("encipher", f"{letter}->{out}")
        return out

    def process(self, text: str) -> str:
        return "".join(self.encrypt_char(ch) for ch in text.upper())

    def __repr__(self) -> str:
        windows = "".join(r.window for r in self.rotors)
        return f"<Machine windows={windows} {self.plugboard!r}>"
