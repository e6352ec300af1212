import argparse
import logging
import re
import sys

import config_paths
from controls import ScrollTo
from data_source import CsvFileSource
from errors import DataSourceError
from log_setup import configure_logging
from rows_view import RowsView
from status_bar import render_status

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

STATUS_WIDTH = 80


def _positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="csvpane",
        description="csvpane - print a window of a large delimited file",
    )
    parser.add_argument("path", nargs="?")
    parser.add_argument("--rows", type=_positive_int, default=None, help="window size")
    parser.add_argument(
        "--from", dest="start", type=_positive_int, default=1, help="first row (1-based)"
    )
    parser.add_argument("--columns", default=None, help="regex selecting columns by header")
    parser.add_argument("--ignore-case", action="store_true", default=None)
    parser.add_argument("--sep", default=",")
    parser.add_argument(
        "--exact-count", action="store_true", help="count rows before paging"
    )
    parser.add_argument("-v", "--version", action="store_true")
    return parser


def _column_pattern(text, ignore_case):
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(text, flags)


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if not args.path:
        parser.print_usage(sys.stderr)
        return 2

    cfg = config_paths.load_config()
    if config_paths.ensure_config_dirs():
        configure_logging(config_paths.LOG_PATH, cfg["LOG_LEVEL"])

    num_rows = args.rows if args.rows is not None else cfg["WINDOW_ROWS"]
    ignore_case = cfg["IGNORE_CASE_COLUMNS"] if args.ignore_case is None else True

    try:
        pattern = _column_pattern(args.columns, ignore_case) if args.columns else None
    except re.error as exc:
        print(f"Invalid column pattern: {exc}", file=sys.stderr)
        return 2

    try:
        source = CsvFileSource(args.path, sep=args.sep)
        if args.exact_count:
            source.count_lines()
        view = RowsView(source, num_rows)
        if pattern is not None:
            view.set_columns_filter(pattern)
        if args.start > 1:
            view.handle_control(ScrollTo(args.start))
    except DataSourceError as exc:
        logger.error("Load failed for %s: %s", args.path, exc)
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    print("\t".join(view.headers()))
    for row in view.rows():
        print("\t".join(row.fields))
    print(render_status(view, STATUS_WIDTH).rstrip())
    return 0


if __name__ == "__main__":
    sys.exit(main())
