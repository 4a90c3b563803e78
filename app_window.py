"""App window: program editor, run button, statevector chart, and output log.

Runs the selected engine on a SimulationWorker and plots the returned
state vector. Errors are shown verbatim in the log pane.
"""

import json
import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QPlainTextEdit,
    QPushButton, QStatusBar, QLabel,
)

from bridge.engine import REPLAY_ENGINE
from bridge.messages import dispatch_message, simulate_request
from bridge.worker import SimulationWorker
from chart.canvas import StatevectorCanvas
from statevector import MalformedStateVectorError, SimulationResult
from report import format_result
from ui_common import LoadingOverlay

logger = logging.getLogger(__name__)


EXAMPLE_PROGRAM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[2];
h q[0];
cx q[0], q[1];
"""

_HALF = 0.5 ** 0.5
EXAMPLE_RESULT = json.dumps(
    {
        "statevector": {"qubitWidth": 2, "bases": [_HALF, 0, 0, 0, 0, 0, _HALF, 0]},
        "probabilities": [0.5, 0, 0, 0.5],
    },
    indent=2,
)


class AppWindow(QMainWindow):
    """Top-level window wiring the editor, worker, and chart together."""

    def __init__(self, engine, engine_path=REPLAY_ENGINE):
        super().__init__()
        self.setWindowTitle("Statevector Plotter")
        self.resize(1200, 750)

        self._engine = engine
        self._worker = None

        # --- Editor + run button ---
        mono = QFont("Menlo")
        mono.setStyleHint(QFont.StyleHint.Monospace)

        self.code_input = QPlainTextEdit()
        self.code_input.setFont(mono)
        self.code_input.setPlainText(
            EXAMPLE_RESULT if engine_path == REPLAY_ENGINE else EXAMPLE_PROGRAM
        )
        self.run_button = QPushButton("Run")
        self.run_button.clicked.connect(self.run_simulation)

        editor_panel = QWidget()
        editor_layout = QVBoxLayout(editor_panel)
        editor_layout.setContentsMargins(0, 0, 0, 0)
        editor_layout.addWidget(self.code_input)
        editor_layout.addWidget(self.run_button)

        # --- Chart + log ---
        self.canvas = StatevectorCanvas()
        self.loading_overlay = LoadingOverlay(self.canvas)

        self.log_output = QPlainTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.setFont(mono)

        output_splitter = QSplitter(Qt.Orientation.Vertical)
        output_splitter.addWidget(self.canvas)
        output_splitter.addWidget(self.log_output)
        output_splitter.setStretchFactor(0, 3)
        output_splitter.setStretchFactor(1, 1)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(editor_panel)
        splitter.addWidget(output_splitter)
        splitter.setStretchFactor(0, 2)
        splitter.setStretchFactor(1, 3)
        self.setCentralWidget(splitter)

        # --- Status bar ---
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._engine_label = QLabel(f"  Engine: {engine_path}  ")
        self._times_label = QLabel()
        self._status_bar.addWidget(self._engine_label)
        self._status_bar.addWidget(self._times_label)

    def set_padding(self, top=None, right=None, bottom=None, left=None) -> None:
        self.canvas.set_padding(top=top, right=right, bottom=bottom, left=left)

    def run_simulation(self) -> None:
        """Start a run on a background worker; one run at a time."""
        if self._worker is not None and self._worker.isRunning():
            return

        self.run_button.setEnabled(False)
        self.loading_overlay.start()

        self._worker = SimulationWorker(
            self._engine, simulate_request(self.code_input.toPlainText()),
        )
        self._worker.finished_message.connect(self._on_message)
        self._worker.start()

    def _on_message(self, message: dict) -> None:
        self.loading_overlay.stop()
        self.run_button.setEnabled(True)
        dispatch_message(message, self._on_complete, self._on_error)

    def _on_complete(self, raw: dict) -> None:
        try:
            result = SimulationResult.from_mapping(raw)
        except MalformedStateVectorError as exc:
            logger.warning("Rejected simulation result: %s", exc)
            self._on_error(str(exc))
            return

        self.canvas.set_statevector(result.statevector)
        self.log_output.setPlainText(format_result(result))
        self._times_label.setText(
            "  " + "  ".join(f"{k}: {v:.1f} ms" for k, v in result.times.items()) + "  "
        )
        logger.info(
            "Plotted %d-qubit state vector", result.statevector.qubit_width,
        )

    def _on_error(self, error: str) -> None:
        logger.info("Simulation error: %s", error)
        self.log_output.setPlainText(error)
        self._times_label.setText("")
