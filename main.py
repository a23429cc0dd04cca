# main.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from cipher_machine import STEPPING_MODES, CipherMachine
from debug import Debug
from errors import ConfigurationError
from machine_settings import MachineSettings, load_config
from wheel_catalog import reflector_names, rotor_names

debug = Debug()

# ────────────────────────────────────────────────────────────────────────
#  0. Logging
# ────────────────────────────────────────────────────────────────────────


def set_verbose(on: bool) -> None:
    """Open every stage of the signal path to the log (or close them all)."""
    Debug.toggle_global(on)
    if on:
        debug.enable_all()
    else:
        debug.disable_all()


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor cipher machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive loop starts.")
    p.add_argument("--config", metavar="FILE", type=Path, help="Load machine settings from JSON instead of the flags below.")
    p.add_argument("--rotors", nargs="+", default=["I", "II", "III"], metavar="NAME", help=f"Rotors left to right, from {rotor_names()}. Default: I II III")
    p.add_argument("--reflector", default="B", type=str.upper, choices=reflector_names(), help="Reflector. Default: B")
    p.add_argument("--positions", default=None, metavar="LETTERS", help="Start positions left to right, e.g. AAA. Default: all A")
    p.add_argument("--rings", nargs="+", type=int, default=None, metavar="N", help="Ring settings 1-26 left to right. Default: all 1")
    p.add_argument("--plugs", nargs="*", default=[], metavar="PAIR", help="Plugboard pairs, e.g. AB CD EF")
    p.add_argument("--stepping", choices=STEPPING_MODES, default="pairwise", help="Rotor stepping rule. Default: pairwise")
    p.add_argument("--verbose", action="store_true", help="Log every stage of the signal path.")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return load_config(args.config)
    return MachineSettings(
        rotors=args.rotors,
        reflector=args.reflector,
        positions=args.positions or "A" * len(args.rotors),
        ring_set=args.rings or [],
        plugs=args.plugs,
        stepping=args.stepping,
    )


def run_once(machine: CipherMachine, text: str) -> str:
    """Encipher *text* from the machine's start positions."""
    machine.reset()
    return machine.encrypt(text)


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbose(args.verbose)

    try:
        settings = settings_from_args(args)
        machine = settings.build()
    except FileNotFoundError as exc:
        sys.exit(f"❌  Config file not found: {exc.filename}")
    except ConfigurationError as exc:
        sys.exit(f"❌  {exc}")

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(run_once(machine, args.message))
        return

    # interactive loop ---------------------------------------------------
    print(f"\nMachine ready: rotors {' '.join(settings.rotors)}, "
          f"reflector {settings.reflector}, start {settings.positions}.")
    print("Every message starts from the same positions. Blank line quits.\n")
    while True:
        try:
            txt = input("Message > ")
        except EOFError:
            break
        if not txt.strip():
            break
        print(run_once(machine, txt))


if __name__ == "__main__":
    main()
