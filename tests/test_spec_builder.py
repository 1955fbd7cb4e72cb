import json
import logging

import pytest
from pydantic import ValidationError

from rotorlab.config import Settings, load_settings
from rotorlab.machine import (
    REFLECTOR_PRESETS,
    ConfigurationError,
    MachineSpec,
    PlugboardSpec,
    ReflectorSpec,
    RotorSpec,
    build_machine,
    dump_machine_spec,
    load_machine_spec,
    machine_spec_from_config,
    validate_spec,
)
from rotorlab.machine.loader import machine_spec_to_config


# ---------------------------------------------------------------------------
# Spec models
# ---------------------------------------------------------------------------

def test_rotor_spec_uppercases_letters():
    spec = RotorSpec(model="III", initial_position="b", ring_setting=" c ")
    assert spec.initial_position == "B"
    assert spec.ring_setting == "C"


@pytest.mark.parametrize("bad", ["1", "AB", ""])
def test_rotor_spec_rejects_non_letters(bad):
    with pytest.raises(ValidationError):
        RotorSpec(model="I", initial_position=bad)


def test_machine_spec_needs_a_rotor():
    with pytest.raises(ValidationError):
        MachineSpec(rotors=[])


def test_plugboard_spec_limits_pairs():
    with pytest.raises(ValidationError):
        PlugboardSpec(pairs=[("A", "B")] * 14)


def test_plugboard_spec_parse():
    assert PlugboardSpec.parse("AK ZC").pairs == [("A", "K"), ("Z", "C")]
    assert PlugboardSpec.parse("").pairs == []
    with pytest.raises(ValueError):
        PlugboardSpec.parse("AKZ")


# ---------------------------------------------------------------------------
# Validator / builder
# ---------------------------------------------------------------------------

def test_validate_collects_every_error():
    spec = MachineSpec(
        rotors=[RotorSpec(model="VI"), RotorSpec(model="II")],
        reflector=ReflectorSpec(model="UKW-A"),
        plugboard=PlugboardSpec(pairs=[("A", "K"), ("A", "L")]),
    )
    ok, errs = validate_spec(spec)
    assert not ok
    assert any("VI" in e for e in errs)
    assert any("UKW-A" in e for e in errs)
    assert any("'A'" in e for e in errs)


def test_build_rejects_unknown_rotor():
    spec = MachineSpec(rotors=[RotorSpec(model="invalid_type")])
    with pytest.raises(ConfigurationError, match="Unknown rotor model"):
        build_machine(spec)


def test_self_plug_pair_reported_once():
    spec = MachineSpec(rotors=[RotorSpec(model="I")], plugboard=PlugboardSpec(pairs=[("A", "A")]))
    ok, errs = validate_spec(spec)
    assert not ok
    assert errs == ["Plug pair AA connects a letter to itself"]


def test_rejected_spec_is_not_logged_as_warning(caplog):
    caplog.set_level(logging.DEBUG, logger="rotorlab")
    with pytest.raises(ConfigurationError):
        build_machine(MachineSpec(rotors=[RotorSpec(model="VI")]))
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_build_rejects_bad_plugboard():
    spec = MachineSpec(rotors=[RotorSpec(model="I")], plugboard=PlugboardSpec(pairs=[("A", "1")]))
    with pytest.raises(ConfigurationError):
        build_machine(spec)


def test_model_aliases():
    spec = MachineSpec(
        rotors=[RotorSpec(model="type_i"), RotorSpec(model="ii"), RotorSpec(model="Type III")],
        reflector=ReflectorSpec(model="ukw_c"),
    )
    m = build_machine(spec)
    assert [r.model_id for r in m.rotors] == ["I", "II", "III"]
    assert m.reflector.model_id == "UKW-C"


def test_explicit_reflector_wiring():
    wiring = REFLECTOR_PRESETS["UKW-C"].wiring
    by_wiring = MachineSpec(rotors=[RotorSpec(model="I")], reflector=ReflectorSpec(model=None, wiring=wiring))
    by_model = MachineSpec(rotors=[RotorSpec(model="I")], reflector=ReflectorSpec(model="UKW-C"))
    assert build_machine(by_wiring).encrypt_message("ENIGMA") == build_machine(by_model).encrypt_message("ENIGMA")


def test_wiring_only_reflector_is_custom():
    wiring = "BADCFEHGJILKNMPORQTSVUXWZY"
    refl = ReflectorSpec(wiring=wiring)
    assert refl.model is None
    spec = MachineSpec(rotors=[RotorSpec(model="I")], reflector=refl)
    assert build_machine(spec).reflector.model_id == "custom"
    assert machine_spec_to_config(spec)["reflector"] == {"wiring": wiring}


def test_reflector_defaults_to_ukw_b():
    assert ReflectorSpec().model == "UKW-B"
    assert MachineSpec(rotors=[RotorSpec(model="I")]).reflector.model == "UKW-B"


def test_explicit_reflector_wiring_must_be_involution():
    spec = MachineSpec(
        rotors=[RotorSpec(model="I")],
        reflector=ReflectorSpec(wiring="EKMFLGDQVZNTOWYHXUSPAIBRCJ"),
    )
    with pytest.raises(ConfigurationError):
        build_machine(spec)


def test_spec_builds_independent_machines(four_rotor_spec):
    a = build_machine(four_rotor_spec)
    b = build_machine(four_rotor_spec)
    a.encrypt_message("AAAA")
    assert b.positions == "ABCD"


# ---------------------------------------------------------------------------
# JSON config files
# ---------------------------------------------------------------------------

_CONFIG = {
    "rotors": [
        {"type_": "type_i", "position": "A", "ring": "A"},
        {"type_": "type_ii", "position": "A", "ring": "A"},
        {"type_": "type_iii", "position": "A", "ring": "A"},
    ],
    "reflector": "ukw_b",
    "plugboard": {"A": "K", "Z": "C"},
}


def test_config_dict_builds_machine():
    spec = machine_spec_from_config(_CONFIG)
    assert spec.positions == "AAA"
    assert spec.plugboard.pairs == [("A", "K"), ("Z", "C")]
    assert build_machine(spec).encrypt_message("BLETCHLEY") == "DZCKFUXHU"


def test_config_plugboard_list_forms():
    cfg = dict(_CONFIG, plugboard=["AK", ["Z", "C"]])
    assert machine_spec_from_config(cfg).plugboard.pairs == [("A", "K"), ("Z", "C")]


def test_load_and_dump_roundtrip(tmp_path, four_rotor_spec):
    path = tmp_path / "machine.json"
    dump_machine_spec(four_rotor_spec, path)
    assert load_machine_spec(path) == four_rotor_spec


def test_load_from_file(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps(_CONFIG), encoding="utf-8")
    assert load_machine_spec(path).rotors[2].model == "type_iii"


@pytest.mark.parametrize("cfg", [
    {"rotors": [{"type_": "type_i", "position": "1", "ring": "A"}], "reflector": "ukw_b"},
    {"rotors": [], "reflector": "ukw_b"},
    {"rotors": [{"position": "A"}], "reflector": "ukw_b"},
    {"reflector": "ukw_b"},
    {"rotors": "I", "reflector": "ukw_b"},
    ["not", "an", "object"],
])
def test_invalid_config_documents(cfg):
    with pytest.raises(ConfigurationError):
        machine_spec_from_config(cfg)


def test_unknown_rotor_in_config_fails_at_build():
    cfg = {"rotors": [{"type_": "invalid_type", "position": "A", "ring": "A"}], "reflector": "ukw_b"}
    with pytest.raises(ConfigurationError, match="Unknown rotor model"):
        build_machine(machine_spec_from_config(cfg))


def test_unreadable_config(tmp_path):
    with pytest.raises(ConfigurationError):
        load_machine_spec(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_machine_spec(bad)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

def test_default_settings_machine():
    m = build_machine(Settings().default_machine_spec())
    assert m.encrypt_message("BANBURISMUS") == "KNAOEZJKNGQ"


def test_settings_fields_are_all_used():
    assert "project_root" not in Settings.model_fields
    assert set(Settings.model_fields) == {
        "default_rotors",
        "default_positions",
        "default_rings",
        "default_reflector",
        "default_plugboard",
        "chunk_size",
        "global_seed",
        "runs_dir",
    }


def test_settings_length_mismatch():
    with pytest.raises(ValueError):
        Settings(default_positions="AB").default_machine_spec()


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("ROTORLAB_ROTORS", "V,III,I")
    monkeypatch.setenv("ROTORLAB_POSITIONS", "QEV")
    monkeypatch.setenv("ROTORLAB_RINGS", "BCD")
    monkeypatch.setenv("ROTORLAB_PLUGBOARD", "AK ZC MT")
    monkeypatch.setenv("ROTORLAB_CHUNK_SIZE", "16")
    load_settings.cache_clear()
    try:
        settings = load_settings()
        assert settings.chunk_size == 16
        m = build_machine(settings.default_machine_spec())
        assert m.encrypt_message("HELLOWORLD") == "VROXYDWDMZ"
    finally:
        load_settings.cache_clear()
