# wheel_catalog.py
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, NamedTuple

from errors import ConfigurationError
from rotor_and_reflector import Reflector, Rotor

_num_re = re.compile(r"^([A-Za-z]+)(\d+)$")


class RotorSpec(NamedTuple):
    wiring: str
    notch: str


# ────────────────────────────────────────────────────────────────────────
#  Wheel database (Enigma I / M3)
# ────────────────────────────────────────────────────────────────────────

ROTORS: Mapping[str, RotorSpec] = MappingProxyType({
    "I":   RotorSpec("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":  RotorSpec("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": RotorSpec("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":  RotorSpec("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":   RotorSpec("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
})

REFLECTORS: Mapping[str, str] = MappingProxyType({
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
})


def _nat_key(name: str):
    """Natural‑sort wheel names so numbered wheels (R2 before R10) order sanely."""
    m = _num_re.match(name)
    if m:
        prefix, num = m.groups()
        return (0, prefix, int(num))
    return (1, name, 0)


def rotor_names() -> list[str]:
    return sorted(ROTORS, key=_nat_key)


def reflector_names() -> list[str]:
    return sorted(REFLECTORS, key=_nat_key)


def build_rotor(name: str, *, position: int | str = 0, ring: int = 0) -> Rotor:
    """Fresh Rotor for catalog entry *name*; names are case-insensitive."""
    try:
        entry = ROTORS[name.upper()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown rotor {name!r}. Expected one of {rotor_names()}"
        ) from None
    return Rotor(entry.wiring, entry.notch, position=position, ring=ring, name=name.upper())


def build_reflector(name: str) -> Reflector:
    try:
        wiring = REFLECTORS[name.upper()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown reflector {name!r}. Expected one of {reflector_names()}"
        ) from None
    return Reflector(wiring, name=name.upper())


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "RotorSpec",
    "build_rotor",
    "build_reflector",
    "rotor_names",
    "reflector_names",
]
