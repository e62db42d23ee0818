"""Command-line shell for sprig.

    sprig FILE     evaluate a program file and print its last value
    sprig          start an interactive REPL with persistent history

Errors are printed; in the REPL the session continues with the next line,
in file mode the run stops with exit status 1. (exit n) ends the process with
status n in both modes.
"""

import argparse
import logging
import readline
import sys
from pathlib import Path

from sprig import __version__
from sprig import config
from sprig.debug_utils.pprint import pprint_error, pprint_expr
from sprig.interpreter import Interpreter
from sprig.types.errors import SprigError, Terminate

logger = logging.getLogger(__name__)


def load_history(path: Path, size: int) -> None:
    readline.set_history_length(size)
    if path.exists():
        try:
            readline.read_history_file(path)
        except OSError as e:
            logger.warning("could not load history from %s: %s", path, e)


def save_history(path: Path) -> None:
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning("could not write history to %s: %s", path, e)


def interpret_file(path: str, interp: Interpreter) -> int:
    """Evaluate a whole file; print the result or the error."""
    try:
        source = Path(path).read_text()
    except OSError as e:
        print(f"failed to read program from file: {e}", file=sys.stderr)
        return 1

    try:
        result = interp.eval(source)
    except SprigError as e:
        print(f"failed to interpret file: {e}", file=sys.stderr)
        return 1

    print(pprint_expr(result))
    return 0


def start_repl(interp: Interpreter, use_history: bool = True, color: bool = False) -> int:
    prompt = config.get_prompt()
    history_file = config.get_history_file()
    if use_history:
        load_history(history_file, config.get_history_size())

    try:
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            if not line.strip():
                continue

            try:
                result = interp.eval(line)
            except SprigError as e:
                print(pprint_error(e, color))
                continue
            except KeyboardInterrupt:
                print()
                logger.info("evaluation interrupted")
                continue
            print(pprint_expr(result, color))
    finally:
        if use_history:
            save_history(history_file)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sprig", description="sprig expression interpreter")
    parser.add_argument("file", nargs="?", help="program read from script file (if omitted, starts the REPL)")
    parser.add_argument("--log-level", default=None, help="logging level (default: $SPRIG_LOG_LEVEL or WARNING)")
    parser.add_argument("--no-history", action="store_true", help="do not load or save REPL history")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = getattr(logging, (args.log_level or config.get_log_level()).upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    try:
        if args.file is not None:
            return interpret_file(args.file, interp)
        return start_repl(interp, use_history=not args.no_history, color=sys.stdout.isatty())
    except Terminate as t:
        logger.debug("terminated with status %d", t.status)
        return t.status


if __name__ == "__main__":
    sys.exit(main())
