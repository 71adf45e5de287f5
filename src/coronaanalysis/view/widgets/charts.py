"""PyQtGraph charts for watt density and dyne decay."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt

from coronaanalysis.config import WATT_DENSITY_UNIT
from coronaanalysis.controller.calculations import SpeedPoint, DecayPoint

logger = logging.getLogger(__name__)


def _style_plot(plot: pg.PlotWidget, title: str, bottom: str, left: str) -> None:
    plot.setBackground('w')
    plot.showGrid(x=True, y=True, alpha=0.3)
    plot.setLabel('bottom', bottom, color='black')
    plot.setLabel('left', left, color='black')
    plot.setTitle(title, color='black', size='12pt')
    for axis in ('bottom', 'left'):
        plot.getAxis(axis).setPen('k')
        plot.getAxis(axis).setTextPen('k')
    plot.addLegend(offset=(10, 10))


class SpeedSweepPlot(pg.PlotWidget):
    """Watt density of both lines against line speed."""

    LINE1_COLOR = '#8884d8'
    LINE4_COLOR = '#82ca9d'

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setMinimumHeight(300)
        _style_plot(self, "Watt Density vs Line Speed", "Line Speed (FPM)", f"Watt Density ({WATT_DENSITY_UNIT})")

    def set_data(self, points: Sequence[SpeedPoint], line1_label: str, line4_label: str) -> None:
        self.clear()

        if not points:
            logger.debug("Speed sweep is empty, nothing to plot.")
            return

        speeds = np.array([p.speed for p in points], dtype=np.float64)
        line1 = np.array([p.line1 for p in points], dtype=np.float64)
        line4 = np.array([p.line4 for p in points], dtype=np.float64)

        for values, name, color in (
            (line1, line1_label, self.LINE1_COLOR),
            (line4, line4_label, self.LINE4_COLOR),
        ):
            self.plot(
                speeds, values,
                pen=pg.mkPen(color=color, width=2),
                name=name,
                symbol='o',
                symbolSize=5,
                symbolBrush=color,
                symbolPen=None,
                connect='finite',
            )


class DyneDecayPlot(pg.PlotWidget):
    """Projected dyne level over time with the untreated level as reference."""

    CURVE_COLOR = '#82ca9d'

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setMinimumHeight(300)
        _style_plot(self, "Dyne Level Decay Over Time", "Days", "Dyne Level (dyn/cm)")

    def set_data(
        self,
        points: Sequence[DecayPoint],
        untreated_dyne: Optional[float],
        material_name: Optional[str],
    ) -> None:
        self.clear()
        title = f"Dyne Level Decay Over Time ({material_name})" if material_name else "Dyne Level Decay Over Time"
        self.setTitle(title, color='black', size='12pt')

        if not points:
            return

        days = np.array([p.day for p in points], dtype=np.float64)
        dynes = np.array([p.dyne for p in points], dtype=np.float64)
        self.plot(
            days, dynes,
            pen=pg.mkPen(color=self.CURVE_COLOR, width=2),
            name="dyne",
            symbol='o',
            symbolSize=5,
            symbolBrush=self.CURVE_COLOR,
            symbolPen=None,
            connect='finite',
        )

        if untreated_dyne is not None and np.isfinite(untreated_dyne):
            ref_line = pg.InfiniteLine(
                pos=untreated_dyne,
                angle=0,
                pen=pg.mkPen(color='r', width=2, style=Qt.PenStyle.DashLine),
                label='Untreated Dyne',
                labelOpts={'position': 0.95, 'color': 'r', 'fill': (255, 255, 255, 150)}
            )
            self.addItem(ref_line)
