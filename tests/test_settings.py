"""
Tests for settings files.
"""

import json

import pytest

from enigma import Machine
from settings import (
    MachineSettings,
    choose_pairs,
    build_rng,
    generate_settings,
    load_settings,
    save_settings,
)
from validation import ErrorKind, ValidationError


class TestMachineSettings:
    """Tests for MachineSettings."""

    def test_defaults(self):
        settings = MachineSettings()
        assert settings.rotors == ("I", "II", "III")
        assert settings.rotor_ids == (0, 1, 2)

    def test_dict_round_trip(self):
        settings = MachineSettings(("III", "I", "II"), (1, 2, 3), (4, 5, 6), ("AB", "CD"))
        assert MachineSettings.from_dict(settings.to_dict()) == settings

    def test_missing_keys(self):
        with pytest.raises(ValueError, match="plugs, positions"):
            MachineSettings.from_dict({"rotors": ["I", "II", "III"], "ring_settings": [0, 0, 0]})

    def test_rejects_non_object(self):
        with pytest.raises(ValueError, match="JSON object"):
            MachineSettings.from_dict([1, 2, 3])

    @pytest.mark.parametrize("rotors", [[], ["I", "II"]])
    def test_requires_three_rotors(self, rotors):
        data = MachineSettings().to_dict()
        data["rotors"] = rotors
        with pytest.raises(ValueError, match="exactly three rotors"):
            MachineSettings.from_dict(data)

    def test_rejects_non_list_values(self):
        data = MachineSettings().to_dict()
        data["positions"] = 5
        with pytest.raises(ValueError, match="'positions' must be a list"):
            MachineSettings.from_dict(data)

    def test_values_are_validated(self):
        data = MachineSettings().to_dict()
        data["positions"] = [0, 0, 40]
        with pytest.raises(ValidationError) as exc:
            MachineSettings.from_dict(data)
        assert exc.value.kind is ErrorKind.RANGE

    def test_plug_conflict_is_reported(self):
        data = MachineSettings().to_dict()
        data["plugs"] = ["AB", "BC"]
        with pytest.raises(ValidationError) as exc:
            MachineSettings.from_dict(data)
        assert exc.value.kind is ErrorKind.PLUGBOARD_CONFLICT


class TestFiles:
    """Tests for load_settings / save_settings."""

    def test_save_and_load(self, tmp_path):
        settings = MachineSettings(positions=(7, 8, 9), plugs=("QW",))
        path = save_settings(settings, tmp_path / "day.json")
        assert json.loads(path.read_text(encoding="utf-8"))["positions"] == [7, 8, 9]
        assert load_settings(path) == settings

    def test_load_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)


class TestGenerate:
    """Tests for random settings."""

    def test_seed_is_deterministic(self):
        assert generate_settings(seed=42) == generate_settings(seed=42)

    def test_generated_settings_are_valid(self):
        for seed in range(20):
            settings = generate_settings(seed=seed)
            assert sorted(settings.rotors) == ["I", "II", "III"]
            assert all(0 <= v <= 25 for v in settings.positions + settings.ring_settings)
            assert len(settings.plugs) == 10
            assert MachineSettings.from_dict(settings.to_dict()) == settings

    def test_generated_settings_round_trip(self):
        settings = generate_settings(seed=7)
        encrypted = Machine.from_settings(settings).process("MEET AT NOON")
        assert Machine.from_settings(settings).process(encrypted) == "MEET AT NOON"

    def test_unseeded(self):
        assert len(generate_settings(max_pairs=3).plugs) == 3

    def test_choose_pairs_caps_at_thirteen(self):
        pairs = choose_pairs(20, build_rng(1))
        assert len(pairs) == 13
        assert len(set("".join(pairs))) == 26
