#!/usr/bin/env python3
"""
XML Formatter Pro - Entry Point.
Supports both GUI mode (default) and CLI mode (--cli or file arguments).

Usage:
    GUI Mode:   python -m xmlformatter.main
    CLI Mode:   python -m xmlformatter.main --mode format --indent 4 file1.xml
    Stdin:      cat doc.xml | python -m xmlformatter.main --cli --mode minify
    CLI Help:   python -m xmlformatter.main --help
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

from .config import APP_TITLE, DEFAULT_INDENT, MESSAGES, STDIN_SOURCE, LOGGER_NAME
from .models import ErrorKind, FormatError, FormatResult, Operation
from .utils.logging_config import setup_logging

logger = logging.getLogger(LOGGER_NAME)


def run_gui():
    """Launch the graphical user interface."""
    import tkinter as tk
    from .ui.app import FormatterApp

    # Native drag & drop needs a TkinterDnD root
    try:
        from tkinterdnd2 import TkinterDnD
        root = TkinterDnD.Tk()
    except (ImportError, RuntimeError, tk.TclError) as e:
        logger.debug("TkinterDnD unavailable (%s), using plain Tk", e)
        root = tk.Tk()

    FormatterApp(root)
    root.mainloop()


def _non_negative_int(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent width: {value!r}")
    if width < 0:
        raise argparse.ArgumentTypeError(f"indent width must be >= 0, got {width}")
    return width


def collect_inputs(paths: List[str]) -> List[str]:
    """Expand directories into XML files; keep '-' (stdin) and plain files."""
    from .utils.file_utils import find_xml_files

    inputs = []
    for path in paths:
        if path == "-":
            inputs.append(path)
        elif os.path.isdir(path):
            inputs.extend(find_xml_files(path))
        elif os.path.isfile(path):
            inputs.append(path)
        else:
            logger.warning("Path not found: %s", path)
    return inputs


def process_input(path: str, operation: Operation, indent_width: int) -> FormatResult:
    """Read one input and run the requested operation on it."""
    from .engine import run_operation
    from .session import is_blank
    from .utils.file_utils import read_file_safe

    if path == "-":
        source = STDIN_SOURCE
        content = sys.stdin.read()
    else:
        source = path
        content, enc = read_file_safe(path)
        if content is None:
            logger.error("Cannot read %s: %s", path, enc)
            return FormatResult.failure(operation, ErrorKind.IO_ERROR, enc,
                                        source=source, indent_width=indent_width)

    if is_blank(content):
        return FormatResult.failure(operation, ErrorKind.BLANK_INPUT, MESSAGES["blank_input"],
                                    source=source, indent_width=indent_width)

    return run_operation(operation, content, indent_width, source=source)


def _write_result(result: FormatResult, args) -> None:
    """Deliver a successful format/minify output to stdout or a file."""
    from .utils.file_utils import write_file_safe
    from .utils.highlight import highlight_terminal

    if args.in_place and result.source != STDIN_SOURCE:
        ok, err = write_file_safe(result.source, result.output + "\n",
                                  create_backup=not args.no_backup)
    elif args.output:
        ok, err = write_file_safe(args.output, result.output + "\n")
    else:
        text = result.output + "\n"
        sys.stdout.write(highlight_terminal(text) if args.color else text)
        return

    if not ok:
        result.output = None
        result.error = FormatError(kind=ErrorKind.IO_ERROR, message=err)


def _print_status(result: FormatResult, verbose: bool) -> None:
    name = os.path.basename(result.source) if result.source != STDIN_SOURCE else result.source
    print(f"{result.status_icon} {name}")
    print(f"   Status: {result.status} | Time: {result.duration_ms:.1f}ms")
    if result.error and (verbose or result.error.kind is not ErrorKind.NOT_WELL_FORMED):
        print(f"   [{result.error.kind}] {result.error.location}: {result.error.detail or result.error.message}")
    elif result.error:
        print(f"   {result.error.message}")


def run_cli(args) -> int:
    """Run the requested operation over every input. Returns the exit code."""
    from .exporters import export_csv, export_json

    inputs = collect_inputs(args.files or ["-"])
    if not inputs:
        logger.error("No XML files found.")
        return 1

    operation = Operation(args.mode)
    # stdin has no file to rewrite in place
    to_stdout = operation is not Operation.VALIDATE and not args.output and (
        not args.in_place or "-" in inputs)

    results = []
    for path in inputs:
        result = process_input(path, operation, args.indent)
        if result.is_success and result.output is not None:
            _write_result(result, args)
        results.append(result)

        if to_stdout:
            if not result.is_success:
                logger.error("%s: %s", result.source, result.error.detail or result.error.message)
        else:
            _print_status(result, args.verbose)

    failed = sum(1 for r in results if not r.is_success)
    if not to_stdout and len(results) > 1:
        print("\n" + "=" * 60)
        print(f"  Total files: {len(results)}")
        print(f"  Passed:      {len(results) - failed}")
        print(f"  Failed:      {failed}")
        print("=" * 60)

    if args.report:
        ext = os.path.splitext(args.report)[1].lower()
        success = False
        if ext == ".csv":
            success = export_csv(results, args.report)
        elif ext == ".json":
            success = export_json(results, args.report)
        else:
            logger.error("Unsupported report format: %s (use .csv or .json)", ext)

        if success:
            logger.info("Report saved to: %s", args.report)

    return 0 if failed == 0 else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xml-formatter",
        description=f"{APP_TITLE} - validate, pretty-print and minify XML",
    )
    parser.add_argument("--version", action="version", version=f"{APP_TITLE}")
    parser.add_argument("--cli", action="store_true", help="Run in CLI mode (reads stdin when no files are given)")
    parser.add_argument("--mode", choices=[op.value for op in Operation], default=Operation.FORMAT.value,
                        help="Operation to run (default: format)")
    parser.add_argument("--indent", "-i", type=_non_negative_int, default=DEFAULT_INDENT,
                        help=f"Spaces per nesting level (default: {DEFAULT_INDENT})")
    parser.add_argument("--output", "-o", type=str, help="Write the result to this file (single input only)")
    parser.add_argument("--in-place", action="store_true", help="Rewrite input files with the result")
    parser.add_argument("--no-backup", action="store_true", help="Do not keep a .bak copy with --in-place")
    parser.add_argument("--report", "-r", type=str, help="Export a report (supports .csv, .json)")
    parser.add_argument("--color", action="store_true", help="Syntax-highlight XML written to the terminal")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show parser diagnostics")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("files", nargs="*", help="XML files, directories, or '-' for stdin")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and args.in_place:
        parser.error("--output and --in-place are mutually exclusive")
    if args.output and (len(args.files) > 1 or any(os.path.isdir(p) for p in args.files)):
        parser.error("--output requires a single input file")

    setup_logging(debug=args.debug)

    if args.cli or args.files:
        sys.exit(run_cli(args))
    else:
        run_gui()


if __name__ == "__main__":
    main()
