# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised while assembling a machine from invalid wheels, plugs or keys.

    A machine that was built without raising this never fails later while
    enciphering.
    """
