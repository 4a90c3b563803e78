"""Simulation worker: QThread that runs the engine off the GUI thread.

Each worker handles one request message and emits exactly one reply message
(simulationComplete or simulationError) through the ``finished_message``
signal, which Qt delivers on the GUI thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from PyQt6.QtCore import QThread, pyqtSignal

from bridge.messages import handle_request

logger = logging.getLogger(__name__)


class SimulationWorker(QThread):
    """Background worker for a single simulation run."""

    finished_message = pyqtSignal(dict)

    def __init__(self, engine: Callable[[str], Mapping], request: Mapping):
        super().__init__()
        self._engine = engine
        self._request = request

    def run(self) -> None:
        logger.debug("Handling %s request", self._request.get("type"))
        self.finished_message.emit(handle_request(self._engine, self._request))
