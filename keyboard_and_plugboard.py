# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable, Mapping

from debug import Debug
from errors import ConfigurationError
from rotor_and_reflector import ALPHABET

debug = Debug()
debug.disable("keyboard", "plugboard")


def _is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch in ALPHABET


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self) -> None:
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(ALPHABET)
        }

    @staticmethod
    def accepts(ch: str) -> bool:
        """True for A–Z and a–z only; everything else bypasses the machine."""
        return len(ch) == 1 and ch in string.ascii_letters

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            signal = self.alpha_to_index[letter.upper()]
        except KeyError:
            raise ValueError(f"Invalid character {letter!r} for the keyboard.")
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(ALPHABET)):
            raise ValueError(f"Signal {signal} out of range 0–{len(ALPHABET) - 1}")
        return ALPHABET[signal]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Partial involution: letters absent from the pairs pass unchanged."""

    def __init__(
        self,
        pairs: Iterable[str | tuple[str, str]] | Mapping[str, str] = (),
    ) -> None:
        self.mapping: dict[str, str] = {ch: ch for ch in ALPHABET}

        if isinstance(pairs, Mapping):
            pairs = self._pairs_from_mapping(pairs)

        used: set[str] = set()
        for raw in pairs:
            # normalise to (a, b)
            if isinstance(raw, str):
                if len(raw) != 2:
                    raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
                a, b = raw
            else:
                try:
                    a, b = raw
                except (TypeError, ValueError):
                    raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = str(a).upper(), str(b).upper()

            if not _is_letter(a) or not _is_letter(b):
                bad = a if not _is_letter(a) else b
                raise ConfigurationError(f"Symbol {bad!r} is not a single letter A-Z")
            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))

        self._table = [ALPHABET.index(self.mapping[ch]) for ch in ALPHABET]

    @staticmethod
    def _pairs_from_mapping(mapping: Mapping[str, str]) -> list[tuple[str, str]]:
        """Collapse a symmetric {a: b, b: a} mapping into pairs.

        Identity entries are allowed and ignored; a one-sided entry is not.
        """
        norm = {str(k).upper(): str(v).upper() for k, v in mapping.items()}
        for k, v in norm.items():
            if not _is_letter(k) or not _is_letter(v):
                raise ConfigurationError(f"Plugboard entry {k!r}->{v!r} must join two single letters")
        pairs: list[tuple[str, str]] = []
        for a, b in norm.items():
            if a == b:
                continue
            if norm.get(b) != a:
                raise ConfigurationError(
                    f"Plugboard mapping is not an involution: {a}->{b} without {b}->{a}"
                )
            if a < b:
                pairs.append((a, b))
        return pairs

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        mapped = self._table[signal]
        debug.log("plugboard", f"{ALPHABET[signal]}->{ALPHABET[mapped]}")
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def pairs(self) -> list[str]:
        return [a + b for a, b in self.mapping.items() if a < b]

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs())}>"
