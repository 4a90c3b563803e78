"""Result tables: state/probabilities and timings, as text or CSV files.

Text tables are rendered with rich into a plain string so they can go
to stdout or the log pane alike. CSV export writes ``<prefix>.state.csv``
and ``<prefix>.times.csv`` next to the given prefix.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Mapping
from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from statevector import SimulationResult

logger = logging.getLogger(__name__)

TABLE_WIDTH = 120


def _render(table: Table) -> str:
    console = Console(
        file=io.StringIO(), width=TABLE_WIDTH, color_system=None, highlight=False,
    )
    console.print(table)
    return console.file.getvalue().rstrip("\n")


def _state_titles(statevector: bool, probabilities: bool) -> list[str]:
    titles = ["Base"]
    if statevector:
        titles += ["Real", "Imaginary"]
    if probabilities:
        titles.append("Probability")
    return titles


def _state_rows(result: SimulationResult, statevector: bool, probabilities: bool):
    sv = result.statevector
    for index, (re, im, p) in enumerate(zip(sv.real(), sv.imag(), result.probabilities)):
        row = []
        if statevector:
            row += [f"{re:.6f}", f"{im:.6f}"]
        if probabilities:
            row.append(f"{p:.6f}")
        yield index, row


def format_state_table(
    result: SimulationResult, statevector: bool = True, probabilities: bool = True,
) -> str:
    """One row per basis state: binary label, then real/imaginary and/or probability."""
    table = Table(box=box.ASCII)
    for title in _state_titles(statevector, probabilities):
        table.add_column(title, justify="left" if title == "Base" else "right")

    labels = result.statevector.labels()
    for index, row in _state_rows(result, statevector, probabilities):
        table.add_row(Text(labels[index]), *row)
    return _render(table)


def format_times_table(times: Mapping[str, float]) -> str:
    table = Table(box=box.ASCII)
    table.add_column("Name")
    table.add_column("Duration (ms)", justify="right")
    for name, ms in times.items():
        table.add_row(Text(name), f"{ms:.3f}")
    return _render(table)


def format_result(
    result: SimulationResult,
    statevector: bool = True,
    probabilities: bool = True,
    times: bool = True,
) -> str:
    """Selected tables separated by blank lines.

    The timing table is left out when the result carries no timings.
    """
    sections = []
    if statevector or probabilities:
        sections.append(format_state_table(result, statevector, probabilities))
    if times and result.times:
        sections.append(format_times_table(result.times))
    return "\n\n".join(sections)


def write_csv(
    result: SimulationResult,
    prefix: Path,
    statevector: bool = True,
    probabilities: bool = True,
    times: bool = True,
) -> list[Path]:
    """Write the selected tables as CSV files and return their paths.

    The state file's ``Base`` column holds the integer basis index.
    """
    prefix = Path(prefix)
    written = []

    if statevector or probabilities:
        path = prefix.with_name(f"{prefix.name}.state.csv")
        with path.open("w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(_state_titles(statevector, probabilities))
            for index, row in _state_rows(result, statevector, probabilities):
                writer.writerow([index, *row])
        written.append(path)

    if times:
        path = prefix.with_name(f"{prefix.name}.times.csv")
        with path.open("w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["Name", "Duration (ms)"])
            for name, ms in result.times.items():
                writer.writerow([name, f"{ms:.3f}"])
        written.append(path)

    for path in written:
        logger.info("Wrote %s", path)
    return written
