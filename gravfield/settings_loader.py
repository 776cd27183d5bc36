#!/usr/bin/env python3
"""
Settings preset loading utilities.

Presets live in settings/*.json at the project root and describe how a run is
launched: population size, boundary switches and pointer mass.

Schema
======
Settings JSON (settings/*.json):
{
  "name": "Human-friendly preset name",
  "description": "Optional description",
  "particle_count": 150,          # optional, default NUM_PARTICLES
  "wrap_out_of_bounds": true,     # optional, default true
  "kill_out_of_bounds": false,    # optional, default false
  "pointer_mass": 100000.0,       # optional, default POINTER_MASS
  "dt": 1.0                       # optional, default DEFAULT_DT
}

Users can add their own JSON files into the folder and they'll be picked up by the loader.
A file that cannot be read yields the defaults; a field with the wrong type falls
back to its default. Both cases are logged as warnings.
"""
import json
import logging
import math
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import DEFAULT_DT, NUM_PARTICLES, POINTER_MASS
from .data_models import SimulationConfig
from .utils import try_float, try_int

logger = logging.getLogger("gravfield")

SETTINGS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "settings")


@dataclass
class Settings:
    name: str = "Default"
    description: str = ""
    particle_count: int = NUM_PARTICLES
    wrap_out_of_bounds: bool = True
    kill_out_of_bounds: bool = False
    pointer_mass: float = POINTER_MASS
    dt: float = DEFAULT_DT

    def to_config(self) -> SimulationConfig:
        return SimulationConfig(
            wrap_out_of_bounds=self.wrap_out_of_bounds,
            kill_out_of_bounds=self.kill_out_of_bounds,
            dt=self.dt,
        )


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings file %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Settings file %s does not hold a JSON object", path)
        return None
    return data


def _coerce_bool(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("Setting %r must be true or false, using %r", key, default)
    return default


def _coerce_number(data: dict, key: str, default, parse, minimum, exclusive=False):
    if key not in data:
        return default
    value = parse(data[key])
    if value is None or not math.isfinite(value) or value < minimum or (exclusive and value == minimum):
        logger.warning("Setting %r has invalid value %r, using %r", key, data[key], default)
        return default
    return value


def parse_settings(data: dict, fallback_name: str = "Default") -> Settings:
    """Build Settings from a decoded JSON object."""
    return Settings(
        name=str(data.get("name") or fallback_name),
        description=str(data.get("description", "")),
        particle_count=_coerce_number(data, "particle_count", NUM_PARTICLES, try_int, 0),
        wrap_out_of_bounds=_coerce_bool(data, "wrap_out_of_bounds", True),
        kill_out_of_bounds=_coerce_bool(data, "kill_out_of_bounds", False),
        pointer_mass=_coerce_number(data, "pointer_mass", POINTER_MASS, try_float, 0.0),
        dt=_coerce_number(data, "dt", DEFAULT_DT, try_float, 0.0, exclusive=True),
    )


def list_settings(settings_dir: str = SETTINGS_DIR) -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for available presets."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(settings_dir):
        return items
    for fn in sorted(os.listdir(settings_dir)):
        if not fn.lower().endswith(".json"):
            continue
        data = _read_json(os.path.join(settings_dir, fn)) or {}
        display = data.get("name") or os.path.splitext(fn)[0]
        items.append((fn, display))
    return items


def load_settings(file_name: str, settings_dir: str = SETTINGS_DIR) -> Settings:
    """
    Load a preset by file name.
    Returns default Settings if the file is missing or malformed.
    """
    path = os.path.join(settings_dir, file_name)
    data = _read_json(path) or {}
    settings = parse_settings(data, fallback_name=os.path.splitext(file_name)[0])
    logger.info("Loaded settings %r from %s", settings.name, path)
    return settings
