"""Simulation messages: one reply per run, success or error.

Shapes:
    {"type": "simulate", "code": str}                        request
    {"type": "simulationComplete", "result": {...}}         success
    {"type": "simulationError", "error": str}               failure

handle_request() answers a simulate request; run_simulation() turns one
engine call into exactly one reply message;
dispatch_message() routes a reply to the matching handler.
"""

from __future__ import annotations

import datetime
import logging
import time
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

SIMULATE = "simulate"
SIMULATION_COMPLETE = "simulationComplete"
SIMULATION_ERROR = "simulationError"


def simulate_request(code: str) -> dict:
    return {"type": SIMULATE, "code": code}


def serialize_times(times: Mapping) -> dict[str, float]:
    """Convert timing values to float milliseconds.

    Accepts numbers (already milliseconds) and datetime.timedelta.
    """
    out = {}
    for name, value in times.items():
        if isinstance(value, datetime.timedelta):
            out[str(name)] = value.total_seconds() * 1000.0
        else:
            out[str(name)] = float(value)
    return out


def run_simulation(engine: Callable[[str], Mapping], code: str) -> dict:
    """Run the engine once and package the outcome as a reply message.

    Never raises for engine failures: any exception becomes a
    simulationError message carrying str(exc).
    """
    start = time.perf_counter()
    try:
        result = engine(code)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        payload = dict(result)
        times = payload.get("times")
        if times:
            payload["times"] = serialize_times(times)
        else:
            payload["times"] = {"simulation": elapsed_ms}
    except Exception as exc:
        logger.exception("Simulation failed")
        return {"type": SIMULATION_ERROR, "error": str(exc) or type(exc).__name__}

    logger.info("Simulation finished in %.1f ms", elapsed_ms)
    return {"type": SIMULATION_COMPLETE, "result": payload}


def handle_request(engine: Callable[[str], Mapping], request: Mapping) -> dict:
    """Answer a request message with exactly one reply message."""
    kind = request.get("type")
    if kind != SIMULATE:
        logger.warning("Unknown request type: %r", kind)
        return {"type": SIMULATION_ERROR, "error": f"Unknown request type: {kind!r}"}
    return run_simulation(engine, request["code"])


def dispatch_message(
    message: Mapping,
    on_complete: Callable[[Mapping], None],
    on_error: Callable[[str], None],
) -> bool:
    """Route a reply message. Returns False for unknown message types."""
    kind = message.get("type")
    if kind == SIMULATION_COMPLETE:
        on_complete(message["result"])
        return True
    if kind == SIMULATION_ERROR:
        on_error(message["error"])
        return True

    logger.warning("Unknown message type: %r", kind)
    return False
