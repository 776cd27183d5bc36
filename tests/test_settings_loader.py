import json

from gravfield.constants import DEFAULT_DT, NUM_PARTICLES, POINTER_MASS
from gravfield.data_models import SimulationConfig
from gravfield.settings_loader import (
    SETTINGS_DIR,
    Settings,
    list_settings,
    load_settings,
    parse_settings,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_valid_settings(tmp_path):
    write_json(tmp_path / "fast.json", {
        "name": "Fast",
        "particle_count": 12,
        "wrap_out_of_bounds": False,
        "kill_out_of_bounds": True,
        "pointer_mass": 5e6,
        "dt": 1.0,
    })
    settings = load_settings("fast.json", settings_dir=str(tmp_path))
    assert settings == Settings(name="Fast", particle_count=12, wrap_out_of_bounds=False,
                                kill_out_of_bounds=True, pointer_mass=5e6, dt=1.0)
    assert settings.to_config() == SimulationConfig(wrap_out_of_bounds=False, kill_out_of_bounds=True)


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings("nope.json", settings_dir=str(tmp_path))
    assert settings.name == "nope"
    assert settings.particle_count == NUM_PARTICLES
    assert settings.to_config() == SimulationConfig()


def test_malformed_file_gives_defaults(tmp_path):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    settings = load_settings("broken.json", settings_dir=str(tmp_path))
    assert settings.pointer_mass == POINTER_MASS
    assert settings.wrap_out_of_bounds is True


def test_bad_fields_fall_back_individually():
    settings = parse_settings({
        "particle_count": "many",
        "wrap_out_of_bounds": "yes",
        "kill_out_of_bounds": True,
        "pointer_mass": -1,
        "dt": "2",
    })
    assert settings.particle_count == NUM_PARTICLES
    assert settings.wrap_out_of_bounds is True
    assert settings.kill_out_of_bounds is True
    assert settings.pointer_mass == POINTER_MASS
    assert settings.dt == 2.0


def test_fractional_particle_count_is_rejected():
    assert parse_settings({"particle_count": 2.5}).particle_count == NUM_PARTICLES
    assert parse_settings({"particle_count": 40.0}).particle_count == 40


def test_list_settings(tmp_path):
    write_json(tmp_path / "b.json", {"name": "Bravo"})
    write_json(tmp_path / "a.json", {})
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    assert list_settings(str(tmp_path)) == [("a.json", "a"), ("b.json", "Bravo")]


def test_list_settings_missing_dir(tmp_path):
    assert list_settings(str(tmp_path / "absent")) == []


def test_shipped_presets_load():
    presets = dict(list_settings(SETTINGS_DIR))
    assert "default.json" in presets
    assert "kill_on_exit.json" in presets
    default = load_settings("default.json")
    assert default.wrap_out_of_bounds and not default.kill_out_of_bounds
    assert default.dt == DEFAULT_DT
    kill = load_settings("kill_on_exit.json")
    assert kill.kill_out_of_bounds and not kill.wrap_out_of_bounds


def test_zero_timestep_falls_back_to_default():
    settings = parse_settings({"dt": 0})
    assert settings.dt == DEFAULT_DT
    assert settings.to_config().dt == DEFAULT_DT
