import pytest

from rotorlab.machine import ALPHABET, REFLECTOR_PRESETS, ROTOR_PRESETS, ConfigurationError, InvalidSymbol, Reflector


@pytest.mark.parametrize("model", sorted(REFLECTOR_PRESETS))
def test_involution_without_fixed_points(model):
    refl = REFLECTOR_PRESETS[model].build()
    for c in ALPHABET:
        assert refl.encrypt(c) != c
        assert refl.encrypt(refl.encrypt(c)) == c


def test_known_pairs():
    ukw_b = REFLECTOR_PRESETS["UKW-B"].build()
    assert ukw_b.encrypt("A") == "Y"
    assert ukw_b.encrypt("B") == "R"
    assert ukw_b.model_id == "UKW-B"

    ukw_c = REFLECTOR_PRESETS["UKW-C"].build()
    assert ukw_c.encrypt("A") == "F"
    assert ukw_c.encrypt("B") == "V"


def test_invalid_symbol():
    with pytest.raises(InvalidSymbol):
        REFLECTOR_PRESETS["UKW-B"].build().encrypt("!")


def test_fixed_point_rejected():
    with pytest.raises(ConfigurationError):
        Reflector(wiring=ALPHABET)


def test_non_involution_rejected():
    # a valid rotor permutation is not a reflector
    with pytest.raises(ConfigurationError):
        Reflector(wiring=ROTOR_PRESETS["I"].wiring)


def test_bad_length_rejected():
    with pytest.raises(ConfigurationError):
        Reflector(wiring="YR")
