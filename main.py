# main.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from debug import COMPONENTS, Debug
from enigma import Machine
from settings import (
    MachineSettings,
    generate_settings,
    load_settings,
    save_settings,
)
from validation import (
    ValidationError,
    parse_plugboard_pairs,
    parse_ring_settings,
    parse_rotor_order,
    parse_rotor_positions,
)
from wheels import ROTOR_SPECS

debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. Settings from options or prompts
# ────────────────────────────────────────────────────────────────────────


def settings_from_strings(
    positions: str,
    rings: str,
    plugs: str,
    rotors: str = "",
) -> MachineSettings:
    """Validate the four operator strings; raises ValidationError."""
    ids = parse_rotor_order(rotors)
    pos = parse_rotor_positions(positions)
    ring = parse_ring_settings(rings)
    pairs = parse_plugboard_pairs(plugs)
    return MachineSettings(
        rotors=tuple(ROTOR_SPECS[i].name for i in ids),
        positions=pos,
        ring_settings=ring,
        plugs=tuple(a + b for a, b in pairs),
    )


def prompt_session() -> tuple[str, MachineSettings]:
    """Interactive chain: message, positions, rings, plugboard."""
    message = input("Enter message: ")
    pos = parse_rotor_positions(input("Rotor positions (e.g. 0 0 0): "))
    ring = parse_ring_settings(input("Ring settings (e.g. 0 0 0): "))
    pairs = parse_plugboard_pairs(input("Plugboard pairs (e.g. AB CD): "))
    settings = MachineSettings(
        positions=pos,
        ring_settings=ring,
        plugs=tuple(a + b for a, b in pairs),
    )
    return message, settings


# ────────────────────────────────────────────────────────────────────────
#  2. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, the interactive prompts start.")
    p.add_argument("--positions", default="0 0 0", help="Three rotor positions 0-25. Default: '0 0 0'")
    p.add_argument("--rings", default="0 0 0", help="Three ring settings 0-25. Default: '0 0 0'")
    p.add_argument("--plugs", default="", help="Plugboard pairs, e.g. 'AB CD'. Default: none")
    p.add_argument("--rotors", default="", help="Rotor order left to right, e.g. 'III I II'. Default: I II III")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the options above.")
    p.add_argument("--save-config", dest="save_config", metavar="FILE", help="Write the settings used for this run to FILE.")
    p.add_argument("--generate", action="store_true", help="Write random settings to --outfile and exit.")
    p.add_argument("--seed", type=int, help="Deterministic seed for --generate (omit for random)")
    p.add_argument("--outfile", type=Path, default=Path("enigma_settings.json"), help="Destination for --generate (default: enigma_settings.json)")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="COMPONENT", help=f"Enable debug logging for: {', '.join(COMPONENTS)}")
    return p.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    if args.debug:
        debug.enable(*args.debug)

    if args.generate:
        settings = generate_settings(args.seed)
        save_settings(settings, args.outfile)
        print(f"Wrote {args.outfile}\n"
              f"   rotors      : {' '.join(settings.rotors)}\n"
              f"   positions   : {' '.join(map(str, settings.positions))}\n"
              f"   rings       : {' '.join(map(str, settings.ring_settings))}\n"
              f"   plug pairs  : {len(settings.plugs)}")
        return 0

    try:
        if args.config:
            settings = load_settings(args.config)
            message = args.message if args.message is not None else input("Enter message: ")
        elif args.message is not None:
            settings = settings_from_strings(args.positions, args.rings, args.plugs, args.rotors)
            message = args.message
        else:
            message, settings = prompt_session()
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Error: failed to load settings: {e}", file=sys.stderr)
        return 1

    if args.save_config:
        try:
            save_settings(settings, args.save_config)
        except OSError as e:
            print(f"Error: failed to save settings: {e}", file=sys.stderr)
            return 1

    machine = Machine.from_settings(settings)
    print("Output:", machine.process(message))
    return 0


if __name__ == "__main__":
    sys.exit(main())
