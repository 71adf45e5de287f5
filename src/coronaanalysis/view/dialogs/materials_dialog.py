"""
Settings Dialog for the Material Table
Edits are applied to the live project state immediately, so the main
window re-renders while the dialog is still open.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QGroupBox, QFormLayout, QScrollArea, QWidget, QDialogButtonBox
)
from PySide6.QtCore import Qt, Signal

from coronaanalysis.model.materials import MaterialField
from coronaanalysis.model.state import ProjectState
from coronaanalysis.utils import format_input

logger = logging.getLogger(__name__)


class MaterialEntryWidget(QGroupBox):
    """One material: name, untreated dyne, decay rate and a delete button."""

    renamed = Signal(str, str)      # old name, new name
    field_edited = Signal(str, str, str)  # name, field, raw text
    remove_requested = Signal(str)

    def __init__(self, name: str, initial_dyne: float, decay_rate: float, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.name = name

        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self.edit_name = QLineEdit(name)
        self.edit_name.setStyleSheet("font-weight: bold;")
        self.edit_name.editingFinished.connect(self._on_name_finished)
        header.addWidget(self.edit_name)

        btn_remove = QPushButton("Delete")
        btn_remove.setStyleSheet("color: #c00;")
        btn_remove.clicked.connect(lambda: self.remove_requested.emit(self.name))
        header.addWidget(btn_remove)
        layout.addLayout(header)

        form = QFormLayout()
        self.edit_dyne = QLineEdit(format_input(initial_dyne))
        self.edit_dyne.textEdited.connect(
            lambda text: self.field_edited.emit(self.name, MaterialField.INITIAL_DYNE.value, text)
        )
        form.addRow("Untreated Dyne", self.edit_dyne)

        self.edit_rate = QLineEdit(format_input(decay_rate))
        self.edit_rate.textEdited.connect(
            lambda text: self.field_edited.emit(self.name, MaterialField.DECAY_RATE.value, text)
        )
        form.addRow("Decay Rate (per day)", self.edit_rate)
        layout.addLayout(form)

    def _on_name_finished(self) -> None:
        new_name = self.edit_name.text()
        if new_name != self.name:
            self.renamed.emit(self.name, new_name)

    def revert_name(self) -> None:
        self.edit_name.setText(self.name)


class MaterialsDialog(QDialog):
    # Emitted after every change to the material table
    materials_changed = Signal()

    def __init__(self, project_state: ProjectState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(480, 600)
        self.project = project_state
        self.entries: dict[str, MaterialEntryWidget] = {}

        self._init_ui()
        self._refresh_list()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)

        # --- NEW MATERIAL ---
        h_add = QHBoxLayout()
        self.edit_new_name = QLineEdit()
        self.edit_new_name.setPlaceholderText("New Material Name")
        self.edit_new_name.returnPressed.connect(self.on_add_clicked)
        h_add.addWidget(self.edit_new_name)

        btn_add = QPushButton("Add")
        btn_add.clicked.connect(self.on_add_clicked)
        h_add.addWidget(btn_add)
        layout.addLayout(h_add)

        # --- MATERIAL LIST ---
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self.list_content = QWidget()
        self.list_layout = QVBoxLayout(self.list_content)
        scroll.setWidget(self.list_content)
        layout.addWidget(scroll)

        self.lbl_status = QLabel("")
        self.lbl_status.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_status)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _refresh_list(self) -> None:
        """Rebuild one entry per material, sorted by name."""
        while self.list_layout.count():
            item = self.list_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self.entries.clear()

        for name in self.project.materials.sorted_names():
            params = self.project.materials.get(name)
            entry = MaterialEntryWidget(name, params.initial_dyne, params.decay_rate)
            entry.renamed.connect(self.on_renamed)
            entry.field_edited.connect(self.on_field_edited)
            entry.remove_requested.connect(self.on_remove_clicked)
            self.list_layout.addWidget(entry)
            self.entries[name] = entry

        self.list_layout.addStretch()

    def _set_status(self, text: str, color: str = "gray") -> None:
        self.lbl_status.setText(text)
        self.lbl_status.setStyleSheet(f"color: {color};")

    # --- SLOTS ---

    def on_add_clicked(self) -> None:
        name = self.edit_new_name.text()
        if not self.project.add_material(name):
            if name.strip():
                self._set_status(f"Material '{name}' already exists.", "#c60")
            return

        self.edit_new_name.clear()
        self._set_status(f"Added '{name}'.")
        self._refresh_list()
        self.materials_changed.emit()

    def on_field_edited(self, name: str, field: str, raw_text: str) -> None:
        self.project.update_material(name, field, raw_text)
        self.materials_changed.emit()

    def on_renamed(self, old_name: str, new_name: str) -> None:
        # Stale signal from an entry that is already being rebuilt
        if old_name not in self.project.materials or old_name not in self.entries:
            return

        if not self.project.rename_material(old_name, new_name):
            if not new_name.strip():
                self._set_status("Name cannot be empty.", "#c60")
            else:
                self._set_status(f"Material '{new_name}' already exists.", "#c60")
            self.entries[old_name].revert_name()
            return

        self._set_status(f"Renamed '{old_name}' to '{new_name}'.")
        self._refresh_list()
        self.materials_changed.emit()

    def on_remove_clicked(self, name: str) -> None:
        if self.project.remove_material(name):
            self._set_status(f"Removed '{name}'.")
            self._refresh_list()
            self.materials_changed.emit()
