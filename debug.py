# debug.py
from __future__ import annotations
import logging
from typing import ClassVar, Dict

LOGGER_NAME = "ENIGMA"

# every stage of the signal path that can report what it does
COMPONENTS = (
    "keyboard",
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
    "config",
)


class Debug:
    """Per-stage switchboard in front of the ``ENIGMA`` logger.

    All instances share one switch map, so a module can silence its own
    stages at import time and the CLI can open every stage with a single
    ``enable_all()``.
    """

    _root_configured: ClassVar[bool] = False
    _switches: ClassVar[Dict[str, bool]] = {c: False for c in COMPONENTS}
    enabled: ClassVar[bool] = True           # global switch

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file. Only the
        first Debug() configures the root logger.
        """
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger(LOGGER_NAME)

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug.enabled and Debug._switches.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def is_on(self, component: str) -> bool:
        self._require(component)
        return Debug.enabled and Debug._switches[component]

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._switches[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._switches[c] = False

    def enable_all(self) -> None:
        self.enable(*COMPONENTS)

    def disable_all(self) -> None:
        self.disable(*COMPONENTS)

    @staticmethod
    def toggle_global(state: bool) -> None:
        """Mute or unmute every stage without touching the switch map."""
        Debug.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current switch map."""
        return dict(Debug._switches)

    # ── helpers ──────────────────────────────────────────────────
    @staticmethod
    def _require(component: str) -> None:
        if component not in COMPONENTS:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._switches.items() if v]
        return f"<Debug enabled={Debug.enabled} active={active}>"
