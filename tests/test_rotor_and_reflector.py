"""
Rotor & Reflector — wiring tables, stepping and signal paths
============================================================
Run with:  python -m pytest tests/ -v
"""

import pytest

from errors import ConfigurationError
from rotor_and_reflector import ALPHABET, Reflector, Rotor
from wheel_catalog import REFLECTORS, ROTORS

WIRING_I = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"

# ── Rotor construction ───────────────────────────────────────────────────────
def test_rotor_exposes_wiring_and_notch():
    r = Rotor(WIRING_I, "Q")
    assert r.wiring == WIRING_I
    assert r.notch == ALPHABET.index("Q")
    assert r.position == 0

def test_rotor_accepts_lowercase_wiring():
    r = Rotor(WIRING_I.lower(), "q")
    assert r.wiring == WIRING_I
    assert r.notch == 16

@pytest.mark.parametrize("wiring", [
    WIRING_I[:-1],                  # too short
    WIRING_I + "A",                 # too long
    "A" + WIRING_I[1:],             # duplicate A, missing E
    "1" + WIRING_I[1:],             # non-letter
])
def test_rotor_rejects_bad_wiring(wiring):
    with pytest.raises(ConfigurationError):
        Rotor(wiring, "Q")

@pytest.mark.parametrize("notch", ["", "QQ", "1", "Ä"])
def test_rotor_rejects_bad_notch(notch):
    with pytest.raises(ConfigurationError):
        Rotor(WIRING_I, notch)

def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        Rotor("ABC", "A")

# ── Rotor positions & stepping ───────────────────────────────────────────────
def test_advance_wraps_around():
    r = Rotor(WIRING_I, "Q", position=25)
    r.advance()
    assert r.position == 0

def test_set_position_accepts_letters_and_ints():
    r = Rotor(WIRING_I, "Q")
    r.set_position("d")
    assert r.position == 3
    assert r.window == "D"
    r.set_position(27)
    assert r.position == 1

def test_set_position_rejects_non_letters():
    r = Rotor(WIRING_I, "Q")
    with pytest.raises(ConfigurationError):
        r.set_position("?")

@pytest.mark.parametrize("kwargs", [
    {"position": 2.0},
    {"position": False},
    {"ring": 1.5},
    {"ring": True},
])
def test_rotor_rejects_non_integer_offsets(kwargs):
    with pytest.raises(ConfigurationError):
        Rotor(WIRING_I, "Q", **kwargs)

def test_at_notch():
    r = Rotor(WIRING_I, "Q", position="P")
    assert not r.at_notch()
    r.advance()
    assert r.at_notch()

# ── Rotor signal paths ───────────────────────────────────────────────────────
def test_forward_at_rest_is_plain_wiring():
    r = Rotor(WIRING_I, "Q")
    assert [ALPHABET[r.forward(i)] for i in range(26)] == list(WIRING_I)

def test_forward_applies_offset_on_entry_and_exit():
    # entry (0+1)=1 -> K(10), exit 10-1 = 9
    r = Rotor(WIRING_I, "Q", position=1)
    assert r.forward(0) == 9

def test_backward_at_rest_is_inverse_table():
    r = Rotor(WIRING_I, "Q")
    assert r.backward(ALPHABET.index("E")) == 0
    assert r.backward(ALPHABET.index("J")) == 25

@pytest.mark.parametrize("name", sorted(ROTORS))
@pytest.mark.parametrize("pos", [0, 1, 13, 25])
@pytest.mark.parametrize("ring", [0, 5])
def test_backward_inverts_forward(name, pos, ring):
    entry = ROTORS[name]
    r = Rotor(entry.wiring, entry.notch, position=pos, ring=ring)
    for c in range(26):
        assert r.backward(r.forward(c)) == c
        assert r.forward(r.backward(c)) == c

def test_forward_is_a_bijection_at_every_position():
    r = Rotor(WIRING_I, "Q")
    for _ in range(26):
        assert sorted(r.forward(c) for c in range(26)) == list(range(26))
        r.advance()

def test_ring_setting_shifts_wiring():
    # ring B, position A: the A contact now meets wiring entry Z (J) + 1 = K
    r = Rotor(WIRING_I, "Q", ring=1)
    assert ALPHABET[r.forward(0)] == "K"

# ── Reflector ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("name", sorted(REFLECTORS))
def test_catalog_reflectors_are_involutions(name):
    refl = Reflector(REFLECTORS[name])
    for c in range(26):
        assert refl.reflect(refl.reflect(c)) == c
        assert refl.reflect(c) != c

def test_reflector_b_maps_a_to_y():
    refl = Reflector(REFLECTORS["B"])
    assert refl.reflect(0) == ALPHABET.index("Y")
    assert refl.wiring == REFLECTORS["B"]

def test_reflector_rejects_non_involution():
    with pytest.raises(ConfigurationError, match="involution"):
        Reflector(WIRING_I)

def test_reflector_rejects_bad_length():
    with pytest.raises(ConfigurationError):
        Reflector("YRUHQ")

def test_reflector_fixed_points_need_opt_in():
    # swap A<->B, everything else maps to itself
    wiring = "BA" + ALPHABET[2:]
    with pytest.raises(ConfigurationError, match="itself"):
        Reflector(wiring)
    refl = Reflector(wiring, allow_fixed_points=True)
    assert refl.reflect(0) == 1
    assert refl.reflect(5) == 5
