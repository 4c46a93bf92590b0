# settings.py
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from random import Random, SystemRandom
from typing import Any, Dict, List, Tuple

from debug import Debug
from validation import (
    parse_plugboard_pairs,
    parse_ring_settings,
    parse_rotor_order,
    parse_rotor_positions,
)
from wheels import ALPHABET, DEFAULT_ORDER, ROTOR_SPECS, SIZE

debug = Debug()

REQUIRED_KEYS = {"rotors", "positions", "ring_settings", "plugs"}


@dataclass(frozen=True, slots=True)
class MachineSettings:
    """Initial configuration of a machine, as kept in a settings file."""

    rotors: Tuple[str, str, str] = tuple(spec.name for spec in ROTOR_SPECS)
    positions: Tuple[int, int, int] = (0, 0, 0)
    ring_settings: Tuple[int, int, int] = (0, 0, 0)
    plugs: Tuple[str, ...] = ()

    @property
    def rotor_ids(self) -> Tuple[int, int, int]:
        return parse_rotor_order(" ".join(self.rotors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rotors": list(self.rotors),
            "positions": list(self.positions),
            "ring_settings": list(self.ring_settings),
            "plugs": list(self.plugs),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MachineSettings":
        if not isinstance(data, dict):
            raise ValueError("Settings file must contain a JSON object")
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ValueError(f"Missing keys in settings: {', '.join(sorted(missing))}")
        for key in sorted(REQUIRED_KEYS):
            if not isinstance(data[key], list):
                raise ValueError(f"Settings key {key!r} must be a list")
        if len(data["rotors"]) != 3:
            raise ValueError(f"Settings must name exactly three rotors, got {len(data['rotors'])}")

        # run everything through the same parsers the prompts use
        ids = parse_rotor_order(" ".join(str(r) for r in data["rotors"]))
        positions = parse_rotor_positions(" ".join(str(p) for p in data["positions"]))
        rings = parse_ring_settings(" ".join(str(r) for r in data["ring_settings"]))
        pairs = parse_plugboard_pairs(" ".join(str(p) for p in data["plugs"]))

        return cls(
            rotors=tuple(ROTOR_SPECS[i].name for i in ids),
            positions=positions,
            ring_settings=rings,
            plugs=tuple(a + b for a, b in pairs),
        )


# ────────────────────────────────────────────────────────────────────────
#  JSON helpers
# ────────────────────────────────────────────────────────────────────────


def load_settings(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    debug.log("settings", f"loaded {path}")
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    debug.log("settings", f"wrote {path}")
    return path


# ────────────────────────────────────────────────────────────────────────
#  Random day-sheets
# ────────────────────────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, SIZE // 2)
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(seed: int | None = None, max_pairs: int = 10) -> MachineSettings:
    rng = build_rng(seed)
    order = rng.sample(range(len(ROTOR_SPECS)), len(DEFAULT_ORDER))
    return MachineSettings(
        rotors=tuple(ROTOR_SPECS[i].name for i in order),
        positions=tuple(rng.randrange(SIZE) for _ in order),
        ring_settings=tuple(rng.randrange(SIZE) for _ in order),
        plugs=tuple(choose_pairs(max_pairs, rng)),
    )
