"""
Line Settings Panel
"""
from PySide6.QtWidgets import QGroupBox, QFormLayout, QLineEdit, QLabel
from PySide6.QtCore import Signal

from coronaanalysis.config import WATT_DENSITY_UNIT, DISPLAY_DECIMALS
from coronaanalysis.controller.calculations import watt_density
from coronaanalysis.model.state import LineConfig, LineField
from coronaanalysis.utils import to_number, format_number, format_input


class LineControlPanel(QGroupBox):
    """Inputs of one production line plus its watt density read-out."""

    # Emitted after the LineConfig has been updated
    data_changed = Signal()

    FIELDS = (
        (LineField.WIDTH, "Web Width (inches)"),
        (LineField.SPEED, "Line Speed (FPM)"),
        (LineField.POWER, "Power (kW)"),
        (LineField.SIDES, "Sides Treated"),
    )

    def __init__(self, title: str, line: LineConfig) -> None:
        super().__init__(title)
        self.line = line
        self.inputs: dict[LineField, QLineEdit] = {}

        form = QFormLayout(self)

        for line_field, label in self.FIELDS:
            edit = QLineEdit()
            edit.setPlaceholderText(label)
            # Bind the field name now, not at call time
            edit.textEdited.connect(lambda text, f=line_field: self.on_value_edited(f, text))
            form.addRow(label, edit)
            self.inputs[line_field] = edit

        self.lbl_density = QLabel()
        self.lbl_density.setStyleSheet("font-weight: bold; color: #444;")
        form.addRow(self.lbl_density)

        self.load_from_state()

    def set_line(self, line: LineConfig) -> None:
        """Rebind the panel after the project state was reset."""
        self.line = line
        self.load_from_state()

    def load_from_state(self) -> None:
        for line_field, edit in self.inputs.items():
            edit.setText(format_input(getattr(self.line, line_field.value)))
        self.update_density()

    def on_value_edited(self, line_field: LineField, text: str) -> None:
        self.line.set_field(line_field, to_number(text))
        self.data_changed.emit()

    def update_density(self) -> None:
        value = format_number(watt_density(self.line), DISPLAY_DECIMALS)
        self.lbl_density.setText(f"Watt Density: {value} {WATT_DENSITY_UNIT}")

