# rotor_and_reflector.py
from __future__ import annotations

import string

from debug import Debug
from errors import ConfigurationError

debug = Debug()
debug.disable("rotor", "reflector")

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)


def _parse_wiring(wiring: str, what: str) -> list[int]:
    """Turn a 26-letter wiring string into a list of alphabet indices."""
    if len(wiring) != SIZE:
        raise ConfigurationError(
            f"{what} wiring must be exactly {SIZE} letters, got {len(wiring)}"
        )
    wiring = wiring.upper()
    if sorted(wiring) != sorted(ALPHABET):
        missing = "".join(sorted(set(ALPHABET) - set(wiring)))
        raise ConfigurationError(
            f"{what} wiring must be a permutation of the alphabet "
            f"(missing {missing or 'nothing'})"
        )
    return [ALPHABET.index(c) for c in wiring]


def letter_or_index(value: int | str, what: str) -> int:
    """Accept a window letter ('A'..'Z') or an integer offset."""
    if isinstance(value, str):
        if len(value) != 1 or value.upper() not in ALPHABET:
            raise ConfigurationError(f"{what} {value!r} is not a letter A-Z")
        return ALPHABET.index(value.upper())
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f"{what} {value!r} must be a letter or an integer")
    return value % SIZE


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        *,
        position: int | str = 0,
        ring: int = 0,
        name: str = "",
    ) -> None:
        self.name = name
        self._fwd = _parse_wiring(wiring, f"Rotor {name}".strip())

        # inverse table: _rev[_fwd[i]] == i
        self._rev = [0] * SIZE
        for i, out in enumerate(self._fwd):
            self._rev[out] = i

        if not isinstance(notch, str) or len(notch) != 1 or notch.upper() not in ALPHABET:
            raise ConfigurationError(f"Notch {notch!r} must be a single letter A-Z")
        self.notch = ALPHABET.index(notch.upper())

        if not isinstance(ring, int) or isinstance(ring, bool):
            raise ConfigurationError(f"Ring setting {ring!r} must be an integer")
        self.ring_setting = ring % SIZE
        self._pos = letter_or_index(position, "Rotor position")

    @property
    def wiring(self) -> str:
        return "".join(ALPHABET[i] for i in self._fwd)

    # ── position ---------------------------------------------------
    @property
    def position(self) -> int:
        return self._pos

    @property
    def window(self) -> str:
        """Letter currently shown in the machine window."""
        return ALPHABET[self._pos]

    def set_position(self, position: int | str) -> "Rotor":
        self._pos = letter_or_index(position, "Rotor position")
        return self

    # ── stepping --------------------------------------------------
    def at_notch(self) -> bool:
        return self._pos == self.notch

    def advance(self) -> None:
        self._pos = (self._pos + 1) % SIZE
        debug.log("rotor", f"{self.name or 'rotor'} -> {self.window}")

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        shift = (sig + self._pos - self.ring_setting) % SIZE
        mapped = self._fwd[shift]
        return (mapped - self._pos + self.ring_setting) % SIZE

    def backward(self, sig: int) -> int:
        shift = (sig + self._pos - self.ring_setting) % SIZE
        mapped = self._rev[shift]
        return (mapped - self._pos + self.ring_setting) % SIZE

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return (
            f"<Rotor{label} pos={self.window} ring={self.ring_setting + 1} "
            f"notch={ALPHABET[self.notch]}>"
        )


class Reflector:
    def __init__(
        self,
        wiring: str,
        *,
        allow_fixed_points: bool = False,
        name: str = "",
    ) -> None:
        self.name = name
        self._map = _parse_wiring(wiring, f"Reflector {name}".strip())

        # ensure involution property (w[i] = j ⇒ w[j] = i)
        for i, j in enumerate(self._map):
            if self._map[j] != i:
                raise ConfigurationError(
                    f"Reflector wiring must be an involution: "
                    f"{ALPHABET[i]}->{ALPHABET[j]} but {ALPHABET[j]}->{ALPHABET[self._map[j]]}"
                )
            if i == j and not allow_fixed_points:
                raise ConfigurationError(
                    f"Reflector wiring maps {ALPHABET[i]} to itself"
                )

    @property
    def wiring(self) -> str:
        return "".join(ALPHABET[i] for i in self._map)

    def reflect(self, sig: int) -> int:
        out = self._map[sig]
        debug.log("reflector", f"{ALPHABET[sig]}->{ALPHABET[out]}")
        return out

    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"<Reflector{label}>"
