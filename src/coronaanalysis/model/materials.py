"""
Material Table
==============
Holds the surface-energy parameters of the substrates the lines treat.

Each material is keyed by its name (unique, case-sensitive, non-empty) and
carries the untreated dyne level and the fractional dyne loss per day.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Dict, Iterator, List, Optional, Union
import logging

from coronaanalysis.config import DEFAULT_MATERIALS, NEW_MATERIAL_DEFAULTS
from coronaanalysis.utils import parse_float

logger = logging.getLogger(__name__)


class MaterialNotFoundError(KeyError):
    """Raised when a material name has no entry in the table."""

    def __init__(self, name: Optional[str]) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Material '{self.name}' is not in the material table."


class MaterialField(StrEnum):
    INITIAL_DYNE = "initial_dyne"
    DECAY_RATE = "decay_rate"


@dataclass
class MaterialParams:
    initial_dyne: float  # dyn/cm, untreated surface
    decay_rate: float    # fraction lost per day


class MaterialTable:
    """
    Ordered name -> MaterialParams mapping.

    Rejected operations (empty or colliding names, unknown entries) are
    no-ops and return False; they never leave two entries with one key.
    """

    def __init__(self, materials: Optional[Dict[str, MaterialParams]] = None) -> None:
        self._materials: Dict[str, MaterialParams] = {}
        for name, params in (materials or {}).items():
            self._materials[name] = replace(params)

    @classmethod
    def from_defaults(cls) -> MaterialTable:
        return cls({
            name: MaterialParams(initial_dyne=dyne, decay_rate=rate)
            for name, (dyne, rate) in DEFAULT_MATERIALS.items()
        })

    # --- QUERIES ---

    def __contains__(self, name: object) -> bool:
        return name in self._materials

    def __len__(self) -> int:
        return len(self._materials)

    def __iter__(self) -> Iterator[str]:
        return iter(self._materials)

    def names(self) -> List[str]:
        """Names in insertion order."""
        return list(self._materials.keys())

    def sorted_names(self) -> List[str]:
        return sorted(self._materials.keys())

    def get(self, name: Optional[str]) -> MaterialParams:
        try:
            return self._materials[name]
        except KeyError:
            raise MaterialNotFoundError(name) from None

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            name: {
                MaterialField.INITIAL_DYNE.value: params.initial_dyne,
                MaterialField.DECAY_RATE.value: params.decay_rate,
            }
            for name, params in self._materials.items()
        }

    # --- MUTATIONS ---

    def add(self, name: str, params: Optional[MaterialParams] = None) -> bool:
        """Insert a new material; the name is kept exactly as typed."""
        if not name.strip():
            logger.debug("Ignoring material with an empty name.")
            return False
        if name in self._materials:
            logger.info(f"Material '{name}' already exists, not added.")
            return False

        if params is None:
            dyne, rate = NEW_MATERIAL_DEFAULTS
            params = MaterialParams(initial_dyne=dyne, decay_rate=rate)

        self._materials[name] = replace(params)
        logger.info(f"Added material '{name}'.")
        return True

    def update_field(self, name: str, field: Union[MaterialField, str], raw_value: Union[str, float]) -> float:
        """
        Parse ``raw_value`` and store it in ``field`` of material ``name``.

        Unparseable text is stored as NaN. Returns the stored value.
        """
        params = self.get(name)
        field = MaterialField(field)
        value = parse_float(raw_value)
        setattr(params, field.value, value)
        logger.debug(f"Material '{name}': {field.value} = {value}")
        return value

    def rename(self, old_name: str, new_name: str) -> bool:
        """Move the entry under ``old_name`` to ``new_name``."""
        if not new_name.strip():
            logger.debug(f"Ignoring empty new name for material '{old_name}'.")
            return False
        if old_name not in self._materials:
            logger.debug(f"Cannot rename unknown material '{old_name}'.")
            return False
        if new_name in self._materials:
            if new_name != old_name:
                logger.info(f"Material '{new_name}' already exists, '{old_name}' not renamed.")
            return False

        self._materials[new_name] = self._materials.pop(old_name)
        logger.info(f"Renamed material '{old_name}' to '{new_name}'.")
        return True

    def remove(self, name: str) -> bool:
        if name not in self._materials:
            return False
        del self._materials[name]
        logger.info(f"Removed material '{name}'.")
        return True
