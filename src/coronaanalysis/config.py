"""
Configuration & Defaults
========================
This module serves as the central registry for start-up defaults and the
constants of the chart generators.

Why is this file needed?
------------------------
1. Reset: The project state is rebuilt from these values on start-up and on
   File -> Reset, so every default lives in exactly one place.
2. Tuning: The sweep and decay constants are shared by the calculator and
   its tests.

Exports:
    DEFAULT_MATERIALS (dict): Start-up material table, name -> (dyne, rate).
    NEW_MATERIAL_DEFAULTS (tuple): Parameters given to a freshly added material.
    DEFAULT_LINE (dict): Start-up configuration of both production lines.
"""
from typing import Dict, Tuple

VISIBLE_APP_NAME: str = "Corona Analysis"

# name -> (untreated dyne level [dyn/cm], decay rate [1/day])
DEFAULT_MATERIALS: Dict[str, Tuple[float, float]] = {
    "TPO": (40.0, 0.03),
    "HDPE": (42.0, 0.02),
    "ABS": (44.0, 0.025),
    "Acrylic": (46.0, 0.015),
}
NEW_MATERIAL_DEFAULTS: Tuple[float, float] = (40.0, 0.02)

DEFAULT_SELECTED_MATERIAL: str = "TPO"
DEFAULT_DESIRED_DYNE: float = 42.0

# width [in], speed [ft/min], power [kW], sides treated
DEFAULT_LINE: Dict[str, float] = {"width": 48.0, "speed": 100.0, "power": 1.0, "sides": 1}
DEFAULT_LINE1_LABEL: str = "Line 1"
DEFAULT_LINE4_LABEL: str = "Line 4"

# Speed sweep: from SWEEP_START_SPEED up to ceil(max speed * SWEEP_HEADROOM),
# split into roughly SWEEP_SEGMENTS steps.
SWEEP_START_SPEED: int = 10
SWEEP_HEADROOM: float = 1.25
SWEEP_SEGMENTS: int = 20

DECAY_DAYS: int = 30

INCHES_PER_FOOT: float = 12.0
WATTS_PER_KILOWATT: float = 1000.0
WATT_DENSITY_UNIT: str = "W/ft²/min"
DISPLAY_DECIMALS: int = 2
