# machine_settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from cipher_machine import STEPPING_MODES, CipherMachine
from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Plugboard
from wheel_catalog import build_reflector, build_rotor

debug = Debug()
debug.disable("config")

REQUIRED_KEYS = {"rotors", "reflector", "positions"}


def _is_str_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


@dataclass(slots=True)
class MachineSettings:
    """Operator's key sheet for one machine.

    ``rotors``, ``ring_set`` and ``positions`` read left-to-right, the way
    they appear in the machine window. Ring settings are 1-based.
    """

    rotors: List[str]
    reflector: str
    positions: str
    ring_set: List[int] = field(default_factory=list)
    plugs: List[str] = field(default_factory=list)
    stepping: str = "pairwise"

    def __post_init__(self) -> None:
        if not _is_str_list(self.rotors):
            raise ConfigurationError(f"Rotors must be a list of names, e.g. ['I', 'II', 'III']: {self.rotors!r}")
        if not isinstance(self.reflector, str):
            raise ConfigurationError(f"Reflector must be a name, e.g. 'B': {self.reflector!r}")
        if self.plugs is None:
            self.plugs = []
        if not _is_str_list(self.plugs):
            raise ConfigurationError(f"Plugs must be a list of letter pairs, e.g. ['AB']: {self.plugs!r}")
        n = len(self.rotors)
        if n == 0:
            raise ConfigurationError("Settings must name at least one rotor")
        if not self.ring_set:
            self.ring_set = [1] * n
        if not isinstance(self.ring_set, list):
            raise ConfigurationError(f"Ring settings must be a list of integers: {self.ring_set!r}")
        if len(self.ring_set) != n:
            raise ConfigurationError(
                f"Expected {n} ring settings, got {len(self.ring_set)}"
            )
        if not all(isinstance(r, int) and not isinstance(r, bool) and 1 <= r <= 26 for r in self.ring_set):
            raise ConfigurationError(f"Ring settings must be integers 1-26: {self.ring_set}")
        if not isinstance(self.positions, str):
            raise ConfigurationError(f"Start positions must be letters, e.g. 'AAA': {self.positions!r}")
        if len(self.positions) != n:
            raise ConfigurationError(
                f"Expected {n} start positions, got {self.positions!r}"
            )
        if self.stepping not in STEPPING_MODES:
            raise ConfigurationError(
                f"Unknown stepping mode {self.stepping!r}. Expected one of {list(STEPPING_MODES)}"
            )
        self.positions = self.positions.upper()

    # ––– (de)serialisation ––––––––––––––––––––––––––––––––––––––

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
        return cls(
            rotors=data["rotors"],
            reflector=data["reflector"],
            positions=data["positions"],
            ring_set=data.get("ring_set") or [],
            plugs=data.get("plugs") or [],
            stepping=data.get("stepping", "pairwise"),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    # ––– machine assembly ––––––––––––––––––––––––––––––––––––––

    def build(self) -> CipherMachine:
        """Assemble a fresh machine; wheels are never shared between builds."""
        # window order is left-to-right, the signal enters on the right
        rotors = [
            build_rotor(name, position=pos, ring=ring - 1)
            for name, pos, ring in zip(self.rotors, self.positions, self.ring_set)
        ]
        rotors.reverse()

        machine = CipherMachine(
            rotors,
            build_reflector(self.reflector),
            Plugboard(self.plugs),
            stepping=self.stepping,
        )
        debug.log("config", f"built {machine!r} from rotors {self.rotors}")
        return machine


def load_config(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object")
    debug.log("config", f"loaded {path}")
    return MachineSettings.from_dict(data)


def save_config(settings: MachineSettings, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    debug.log("config", f"wrote {path}")
    return path
