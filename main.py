"""Entry point for the Statevector Plotter.

Supports two modes:
- GUI (default): edit a program, run it, and plot the resulting state
- Headless (--print or --out): run the engine once and print the state
  tables, or write them as CSV files

Usage:
    python main.py [--engine module:attr] [--input FILE] [--print]
                   [--statevector] [--probabilities] [--times] [--out PREFIX]
                   [--padding TOP RIGHT BOTTOM LEFT] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from pathlib import Path

from bridge.engine import REPLAY_ENGINE, load_engine
from bridge.messages import dispatch_message, handle_request, simulate_request
from report import format_result, write_csv
from statevector import MalformedStateVectorError, SimulationResult

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot the amplitudes and phases of a simulated state vector.",
    )
    parser.add_argument(
        "--engine", default=REPLAY_ENGINE,
        help="Simulation engine as module:attribute (default: %(default)s)",
    )
    parser.add_argument(
        "--input", type=Path, default=None,
        help="Source file to load (and run immediately in the GUI)",
    )
    parser.add_argument(
        "--print", dest="print_only", action="store_true",
        help="Run --input once without the GUI and print the result tables",
    )

    tables = parser.add_argument_group(
        "result tables",
        "Headless output selection. Without any of these, all tables are shown.",
    )
    tables.add_argument(
        "--statevector", action="store_true",
        help="Show the real and imaginary part of each amplitude",
    )
    tables.add_argument(
        "--probabilities", action="store_true",
        help="Show the probability of each basis state",
    )
    tables.add_argument(
        "--times", action="store_true",
        help="Show the times measured by the engine",
    )
    tables.add_argument(
        "--out", type=Path, default=None, metavar="PREFIX",
        help="Write PREFIX.state.csv and PREFIX.times.csv instead of printing "
             "(implies --print)",
    )

    parser.add_argument(
        "--padding", type=float, nargs=4, metavar=("TOP", "RIGHT", "BOTTOM", "LEFT"),
        default=None, help="Chart padding in pixels",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def table_selection(args: argparse.Namespace) -> dict[str, bool]:
    """Which tables to emit; nothing selected means everything."""
    selected = {
        "statevector": args.statevector,
        "probabilities": args.probabilities,
        "times": args.times,
    }
    if not any(selected.values()):
        return dict.fromkeys(selected, True)
    return selected


def print_result(engine, source: str, out: Path | None = None, **tables) -> int:
    """Headless run. Returns a process exit code."""
    outcome = {}

    def on_complete(raw):
        try:
            outcome["result"] = SimulationResult.from_mapping(raw)
        except MalformedStateVectorError as exc:
            outcome["error"] = str(exc)

    def on_error(error):
        outcome["error"] = error

    reply = handle_request(engine, simulate_request(source))
    dispatch_message(reply, on_complete, on_error)
    if "error" in outcome:
        print(outcome["error"], file=sys.stderr)
        return 1

    if out is not None:
        try:
            write_csv(outcome["result"], out, **tables)
        except OSError as exc:
            print(f"Cannot write {out}: {exc}", file=sys.stderr)
            return 1
        return 0

    print(format_result(outcome["result"], **tables))
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        engine = load_engine(args.engine)
    except (ValueError, ImportError, AttributeError) as exc:
        parser.error(f"cannot load engine {args.engine!r}: {exc}")

    source = None
    if args.input is not None:
        try:
            source = args.input.read_text()
        except OSError as exc:
            parser.error(f"cannot read {args.input}: {exc}")

    if args.print_only or args.out is not None:
        if source is None:
            parser.error("--print and --out require --input")
        return print_result(engine, source, out=args.out, **table_selection(args))

    from PyQt6.QtWidgets import QApplication
    from app_window import AppWindow

    app = QApplication(sys.argv[:1])
    window = AppWindow(engine, engine_path=args.engine)
    if args.padding is not None:
        top, right, bottom, left = args.padding
        window.set_padding(top=top, right=right, bottom=bottom, left=left)
    window.show()

    if source is not None:
        window.code_input.setPlainText(source)
        window.run_simulation()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
