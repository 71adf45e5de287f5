"""
Corona Treatment Calculations
=============================
Pure functions behind the two read-outs and the two charts.

Nothing here validates its input: zero widths, speeds or sides give
infinity (or NaN for 0/0), decay rates outside [0, 1) give a degenerate but
finite-length curve. The only guard is on the speed sweep, which must
terminate.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING
import logging
import math

import numpy as np

from coronaanalysis.config import (
    INCHES_PER_FOOT, WATTS_PER_KILOWATT, DISPLAY_DECIMALS, DECAY_DAYS,
    SWEEP_START_SPEED, SWEEP_HEADROOM, SWEEP_SEGMENTS,
)
from coronaanalysis.utils import round_half_up

if TYPE_CHECKING:
    import numpy.typing as npt
    from coronaanalysis.model.state import LineConfig, ProjectState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeedPoint:
    speed: float    # ft/min
    line1: float    # W/ft²/min
    line4: float    # W/ft²/min


@dataclass(frozen=True)
class DecayPoint:
    day: int
    dyne: float     # dyn/cm


def _watt_density_at(
    line: LineConfig,
    speed: float | npt.NDArray[np.float64],
) -> float | npt.NDArray[np.float64]:
    """
    Watt density of ``line`` at ``speed`` (scalar or array).

    Division follows IEEE-754: x/0 is inf, 0/0 is NaN.
    """
    width_feet = np.float64(line.width) / INCHES_PER_FOOT
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return (np.float64(line.power) * WATTS_PER_KILOWATT) / (width_feet * speed * np.float64(line.sides))


def watt_density(line: LineConfig) -> float:
    """
    Watt density of a line in W/ft²/min.

    Args:
        line: Width [in], speed [ft/min], power [kW] and sides treated.

    Returns:
        power * 1000 / (width / 12 * speed * sides), unrounded.
    """
    return float(_watt_density_at(line, np.float64(line.speed)))


def _nan_first(value: float) -> float:
    # max() drops NaN depending on argument order; make NaN always win.
    return math.inf if math.isnan(value) else value


def sweep_speeds(max_speed: float) -> npt.NDArray[np.float64]:
    """
    Line speeds sampled for the watt density chart.

    From SWEEP_START_SPEED up to ceil(max_speed * 1.25) inclusive, in steps
    of ceil(extended_max / 20), but never less than 1. Speeds are float64
    so any finite line speed can be swept.
    """
    extended = max_speed * SWEEP_HEADROOM
    if not math.isfinite(extended):
        logger.warning(f"Line speed {max_speed} is not a finite number, speed sweep is empty.")
        return np.array([], dtype=np.float64)

    extended_max = math.ceil(extended)
    step = math.ceil(extended_max / SWEEP_SEGMENTS)
    if step < 1:
        logger.warning(f"Speed sweep step evaluated to {step} (max speed {max_speed}), clamped to 1.")
        step = 1

    # Point count in exact integer arithmetic, at most SWEEP_SEGMENTS + 1
    count = max(0, (extended_max - SWEEP_START_SPEED) // step + 1)
    return SWEEP_START_SPEED + np.arange(count, dtype=np.float64) * float(step)


def speed_sweep(line1: LineConfig, line4: LineConfig) -> List[SpeedPoint]:
    """
    Watt density of both lines against a shared line speed axis.

    Width, power and sides of each line stay at their configured values,
    only the speed is swept. Densities are rounded to 2 decimals.
    """
    speeds = sweep_speeds(max(line1.speed, line4.speed, key=_nan_first))
    if speeds.size == 0:
        return []

    densities1 = _watt_density_at(line1, speeds)
    densities4 = _watt_density_at(line4, speeds)

    return [
        SpeedPoint(
            speed=float(speed),
            line1=round_half_up(wd1, DISPLAY_DECIMALS),
            line4=round_half_up(wd4, DISPLAY_DECIMALS),
        )
        for speed, wd1, wd4 in zip(speeds, densities1, densities4)
    ]


def dyne_decay(decay_rate: float, desired_dyne: float, days: int = DECAY_DAYS) -> List[DecayPoint]:
    """
    Projected dyne level for days 0..``days`` after treatment.

    The level is compounded once per day by (1 - decay_rate). Each point is
    rounded to 2 decimals, while the running level stays unrounded.
    """
    points: List[DecayPoint] = []
    dyne = float(desired_dyne)
    retained = 1.0 - float(decay_rate)
    for day in range(days + 1):
        points.append(DecayPoint(day=day, dyne=round_half_up(dyne, DISPLAY_DECIMALS)))
        dyne *= retained
    return points


def material_decay(project: ProjectState) -> List[DecayPoint]:
    """
    Decay curve of the selected material, starting at the desired dyne level.

    Raises:
        MaterialNotFoundError: The selection does not name an existing material.
    """
    params = project.selected_params()
    return dyne_decay(params.decay_rate, project.desired_dyne)
