# cipher_machine.py  ───────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor, letter_or_index

debug = Debug()
debug.disable("stepping", "encipher")

STEPPING_MODES = ("pairwise", "odometer")


class CipherMachine:
    """Rotor machine: plugboard → rotors → reflector → rotors → plugboard.

    ``rotors`` are given in signal-entry order, i.e. the rightmost physical
    rotor first. The only state that changes while enciphering is each
    rotor's position; ``reset()`` rewinds them to the positions the machine
    was built (or last keyed) with.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Plugboard | None = None,
        *,
        positions: Sequence[int | str] | None = None,
        stepping: str = "pairwise",
    ) -> None:
        if not rotors:
            raise ConfigurationError("A machine needs at least one rotor")
        if stepping not in STEPPING_MODES:
            raise ConfigurationError(
                f"Unknown stepping mode {stepping!r}. Expected one of {list(STEPPING_MODES)}"
            )

        self.kb = Keyboard()
        self.pb = plugboard if plugboard is not None else Plugboard()
        self.rotors: tuple[Rotor, ...] = tuple(rotors)
        self.reflector = reflector
        self.stepping = stepping

        if positions is not None:
            self.set_positions(positions)
        else:
            self._initial = self.positions

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        """Current rotor offsets, entry-first."""
        return tuple(r.position for r in self.rotors)

    def set_positions(self, positions: Sequence[int | str], *, remember: bool = True) -> None:
        """Rotate each rotor (entry-first) to *positions*.

        With ``remember`` the new positions also become the ones ``reset``
        returns to.
        """
        if len(positions) != len(self.rotors):
            raise ConfigurationError(
                f"Expected {len(self.rotors)} rotor positions, got {len(positions)}"
            )
        offsets = [letter_or_index(p, "Rotor position") for p in positions]
        for rotor, offset in zip(self.rotors, offsets):
            rotor.set_position(offset)
        if remember:
            self._initial = tuple(offsets)

    def reset(self) -> None:
        """Rewind every rotor to the remembered start positions."""
        for rotor, offset in zip(self.rotors, self._initial):
            rotor.set_position(offset)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors one key-press, deciding from pre-step positions."""
        if self.stepping == "pairwise":
            # --- notch pairs, includes the double-step ----------
            marks = [False] * len(self.rotors)
            marks[0] = True
            for i, rotor in enumerate(self.rotors[:-1]):
                if rotor.at_notch():
                    marks[i] = marks[i + 1] = True
        else:
            # --- plain carry cascade, no double-step ------------
            marks = [False] * len(self.rotors)
            carry = True
            for i, rotor in enumerate(self.rotors):
                if not carry:
                    break
                marks[i] = True
                carry = rotor.at_notch()

        for rotor, hit in zip(self.rotors, marks):
            if hit:
                rotor.advance()

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        """Step, then run one letter through the whole wiring path."""
        signal = self.kb.forward(letter)

        self._step_rotors()
        debug.log("stepping", f"Rotor pos {[r.window for r in self.rotors]}")

        signal = self.pb.forward(signal)

        for rotor in self.rotors:
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def encrypt(self, text: str) -> str:
        """Encipher letters; copy everything else through without stepping."""
        return "".join(
            self.encrypt_char(ch) if self.kb.accepts(ch) else ch
            for ch in text
        )

    def decrypt(self, text: str) -> str:
        """Rewind to the start positions, then run the same transform."""
        self.reset()
        return self.encrypt(text)

    def __repr__(self) -> str:
        window = "".join(r.window for r in reversed(self.rotors))
        return f"<CipherMachine window={window} stepping={self.stepping} {self.pb!r}>"
