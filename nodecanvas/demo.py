"""
demo.py — builds the Variable → Print graph through pointer gestures
=====================================================================
Adds a Variable and a Print node, drags a link from the Variable's output
connector to the Print's input connector, compiles and optionally runs.

Usage
-----
    python -m nodecanvas.demo [--value 42] [--run] [-v]

    --value   Value typed into the Variable node (parsed as JSON when
              possible, otherwise kept as a string)
    --run     Execute the compiled text with the statement interpreter
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from nodecanvas.editor.EditorSession import start_editor
from nodecanvas.render.recording import RecordingRenderAdapter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nodecanvas.demo",
        description="Wire a Variable node into a Print node and compile the graph.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--value", default="42", help="value for the Variable node (default: 42)")
    p.add_argument("--run", action="store_true", help="run the compiled text")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = start_editor(RecordingRenderAdapter())

    variable = session.add_variable()
    printer = session.add_print()
    session.set_value(variable.identifier, _parse_value(args.value))

    # Drag from the variable's output connector onto the printer's input.
    out = variable.output_point()
    inp = printer.input_point()
    session.press(out.x, out.y)
    session.move(inp.x, inp.y)
    session.release(inp.x, inp.y)

    print(session.compile())

    if args.run:
        session.run()
        for value in session.console:
            print(f"> {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
