"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the input panels and the
two charts.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: Every panel reports its edits here, and refresh() recomputes
   both read-outs and both charts from the project state.
"""
import logging
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout,
    QComboBox, QLineEdit, QScrollArea
)
from PySide6.QtGui import QAction

from coronaanalysis.config import VISIBLE_APP_NAME
from coronaanalysis.controller.calculations import speed_sweep, material_decay, DecayPoint
from coronaanalysis.model.state import ProjectState
from coronaanalysis.utils import to_number, format_input
from coronaanalysis.view.dialogs.materials_dialog import MaterialsDialog
from coronaanalysis.view.widgets.charts import SpeedSweepPlot, DyneDecayPlot
from coronaanalysis.view.widgets.line_panel import LineControlPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project: ProjectState = project_state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 950)

        # --- MAIN CONTAINER (scrollable) ---
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

        main_widget = QWidget()
        scroll.setWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. MATERIAL SELECTION ---
        material_group = QGroupBox("Material")
        material_form = QFormLayout(material_group)

        self.combo_material = QComboBox()
        self.combo_material.currentTextChanged.connect(self.on_material_selected)
        material_form.addRow("Material", self.combo_material)

        self.edit_desired_dyne = QLineEdit()
        self.edit_desired_dyne.textEdited.connect(self.on_desired_dyne_edited)
        material_form.addRow("Desired Dyne Level", self.edit_desired_dyne)

        main_layout.addWidget(material_group)

        # --- 2. LINE PANELS ---
        lines_layout = QHBoxLayout()
        self.line1_panel = LineControlPanel(self.project.line1_label, self.project.line1)
        self.line4_panel = LineControlPanel(self.project.line4_label, self.project.line4)
        lines_layout.addWidget(self.line1_panel)
        lines_layout.addWidget(self.line4_panel)
        main_layout.addLayout(lines_layout)

        # --- 3. CHARTS ---
        self.speed_plot = SpeedSweepPlot()
        main_layout.addWidget(self.speed_plot)

        self.decay_plot = DyneDecayPlot()
        main_layout.addWidget(self.decay_plot)

        # --- SIGNAL CONNECTIONS ---
        self.line1_panel.data_changed.connect(self.on_data_changed)
        self.line4_panel.data_changed.connect(self.on_data_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.load_from_state()

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset", self)
        self.act_reset.triggered.connect(self.on_reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_settings = QAction("Materials...", self)
        self.act_settings.setShortcut("Ctrl+,")
        self.act_settings.triggered.connect(self.open_settings)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        settings_menu = menu_bar.addMenu("&Settings")
        settings_menu.addAction(self.act_settings)

    # --- SLOTS ---

    def on_data_changed(self) -> None:
        """Slot called after any edit of the project state."""
        self.refresh()

    def on_material_selected(self, name: str) -> None:
        if not name or name == self.project.selected_material:
            return
        self.project.selected_material = name
        self.on_data_changed()

    def on_desired_dyne_edited(self, text: str) -> None:
        self.project.desired_dyne = to_number(text)
        self.on_data_changed()

    def on_reset(self) -> None:
        self.project.reset()
        self.load_from_state()

    def open_settings(self) -> None:
        dlg = MaterialsDialog(self.project, self)
        dlg.materials_changed.connect(self.on_data_changed)
        dlg.exec()

    # --- RENDERING ---

    def load_from_state(self) -> None:
        """Refill every input from the project state, then re-render."""
        self.line1_panel.setTitle(self.project.line1_label)
        self.line4_panel.setTitle(self.project.line4_label)
        self.line1_panel.set_line(self.project.line1)
        self.line4_panel.set_line(self.project.line4)
        self.edit_desired_dyne.setText(format_input(self.project.desired_dyne))
        self.refresh()

    def refresh(self) -> None:
        """Recompute both watt densities and both chart datasets."""
        selected = self.project.ensure_selection()
        self._refresh_material_combo()

        self.line1_panel.update_density()
        self.line4_panel.update_density()

        self.speed_plot.set_data(
            speed_sweep(self.project.line1, self.project.line4),
            self.project.line1_label,
            self.project.line4_label,
        )

        decay: List[DecayPoint] = []
        untreated: Optional[float] = None
        if selected is not None:
            decay = material_decay(self.project)
            untreated = self.project.untreated_dyne()
        self.decay_plot.set_data(decay, untreated, selected)

    def _refresh_material_combo(self) -> None:
        names = self.project.materials.names()
        current = [self.combo_material.itemText(i) for i in range(self.combo_material.count())]

        self.combo_material.blockSignals(True)
        try:
            if names != current:
                self.combo_material.clear()
                self.combo_material.addItems(names)
            if self.project.selected_material is not None:
                self.combo_material.setCurrentText(self.project.selected_material)
        finally:
            self.combo_material.blockSignals(False)
