"""
Project State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds both line configurations, the material table
   and the material selection in one place.
2. Decoupling: Views read from this object and write to it through the
   methods below; the calculator only ever reads it.

Classes:
    LineConfig: Machine settings of one production line.
    ProjectState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional, Union
import logging

from coronaanalysis.config import (
    DEFAULT_LINE, DEFAULT_LINE1_LABEL, DEFAULT_LINE4_LABEL,
    DEFAULT_SELECTED_MATERIAL, DEFAULT_DESIRED_DYNE,
)
from coronaanalysis.model.materials import MaterialTable, MaterialParams, MaterialField

logger = logging.getLogger(__name__)


class LineField(StrEnum):
    WIDTH = "width"
    SPEED = "speed"
    POWER = "power"
    SIDES = "sides"


@dataclass
class LineConfig:
    width: float = DEFAULT_LINE["width"]   # in
    speed: float = DEFAULT_LINE["speed"]   # ft/min
    power: float = DEFAULT_LINE["power"]   # kW
    # 1 or 2 in practice; stored as typed so NaN can flow through
    sides: float = DEFAULT_LINE["sides"]

    def set_field(self, line_field: Union[LineField, str], value: float) -> None:
        setattr(self, LineField(line_field).value, value)


@dataclass
class ProjectState:
    """
    Holds the entire state of the calculator.
    Pass this instance to the panels and dialogs.
    """
    materials: MaterialTable = field(default_factory=MaterialTable.from_defaults)

    line1: LineConfig = field(default_factory=LineConfig)
    line4: LineConfig = field(default_factory=LineConfig)
    line1_label: str = DEFAULT_LINE1_LABEL
    line4_label: str = DEFAULT_LINE4_LABEL

    selected_material: Optional[str] = DEFAULT_SELECTED_MATERIAL
    desired_dyne: float = DEFAULT_DESIRED_DYNE

    def reset(self) -> None:
        """Restore the start-up defaults."""
        self.materials = MaterialTable.from_defaults()
        self.line1 = LineConfig()
        self.line4 = LineConfig()
        self.line1_label = DEFAULT_LINE1_LABEL
        self.line4_label = DEFAULT_LINE4_LABEL
        self.selected_material = DEFAULT_SELECTED_MATERIAL
        self.desired_dyne = DEFAULT_DESIRED_DYNE
        logger.info("Project state has been reset.")

    # --- MATERIAL TABLE ---

    def add_material(self, name: str) -> bool:
        return self.materials.add(name)

    def update_material(self, name: str, material_field: Union[MaterialField, str], raw_value: Union[str, float]) -> float:
        return self.materials.update_field(name, material_field, raw_value)

    def rename_material(self, old_name: str, new_name: str) -> bool:
        """Rename an entry; the selection follows it."""
        renamed = self.materials.rename(old_name, new_name)
        if renamed and self.selected_material == old_name:
            self.selected_material = new_name
        return renamed

    def remove_material(self, name: str) -> bool:
        """Remove an entry. The selection is NOT reassigned, see ensure_selection()."""
        return self.materials.remove(name)

    # --- SELECTION ---

    def has_valid_selection(self) -> bool:
        return self.selected_material is not None and self.selected_material in self.materials

    def ensure_selection(self) -> Optional[str]:
        """
        Repair an orphaned selection.

        Falls back to the first remaining material, or None when the table
        is empty. Returns the (possibly new) selection.
        """
        if self.has_valid_selection():
            return self.selected_material

        names = self.materials.names()
        fallback = names[0] if names else None
        if fallback != self.selected_material:
            logger.info(f"Selected material '{self.selected_material}' no longer exists, using '{fallback}'.")
            self.selected_material = fallback
        return fallback

    def selected_params(self) -> MaterialParams:
        """Parameters of the selected material; raises MaterialNotFoundError if orphaned."""
        return self.materials.get(self.selected_material)

    def untreated_dyne(self) -> float:
        return self.selected_params().initial_dyne
