"""Simulation engine selection.

An engine is any callable ``engine(source: str) -> Mapping`` returning
``{"statevector": {"qubitWidth", "bases"}, "probabilities", "times"}``.
Engines are chosen by ``"module:attribute"`` path so an external
simulator can be plugged in without code changes here.

The built-in replay engine reads a previously serialized result, which
is enough to drive the plotter without a simulator installed.
"""

from __future__ import annotations

import importlib
import json
import logging
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

REPLAY_ENGINE = "bridge.engine:replay_engine"

SimulationEngine = Callable[[str], Mapping]


class SimulationError(Exception):
    """Expected engine failure; its message is shown to the user as-is."""


def load_engine(path: str) -> SimulationEngine:
    """Resolve a ``"module:attribute"`` path to an engine callable.

    Raises:
        ValueError: If the path is not of the form module:attribute, or
            the target is not callable.
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Engine path must look like 'module:attribute', got {path!r}")

    module = importlib.import_module(module_name)
    engine = module
    for part in attr.split("."):
        engine = getattr(engine, part)
    if not callable(engine):
        raise ValueError(f"Engine {path!r} is not callable")

    logger.info("Using simulation engine %s", path)
    return engine


def replay_engine(source: str) -> Mapping:
    """Return a serialized simulation result parsed from JSON text.

    Accepts either a full result ``{"statevector": {...}, ...}`` or a bare
    state vector ``{"qubitWidth", "bases"}``.
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise SimulationError(
            f"Invalid result JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc

    if not isinstance(data, dict):
        raise SimulationError("Result JSON must be an object")
    if "statevector" in data:
        return data
    if "qubitWidth" in data and "bases" in data:
        return {"statevector": data}
    raise SimulationError("Result JSON has no 'statevector' field")
