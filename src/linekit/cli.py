# src/linekit/cli.py
import sys
import argparse
import functools
from pathlib import Path

# Module imports
from linekit.config import STDIN_MARKER, STDOUT_LABEL
from linekit.core.counter import count, format_counts, resolve_fields
from linekit.core.dedupe import collapse_runs
from linekit.core.echo import render_echo
from linekit.core.exclude import load_exclude_spec
from linekit.core.finder import find_files
from linekit.core.matcher import PatternError, compile_pattern, find_lines
from linekit.core.source import iter_raw_lines, open_sink, open_source
from linekit.models import FileInfo
from linekit.utils.report import report, report_error

def cli_entry(func):
    """Shared top-level handling: Ctrl-C and unexpected errors exit with status 1."""
    @functools.wraps(func)
    def wrapper(argv=None):
        try:
            func(argv)
        except KeyboardInterrupt:
            print("\nCancelled.", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"An unexpected error occurred: {e}", file=sys.stderr)
            sys.exit(1)
    return wrapper

# --- echo ---

def create_echo_parser():
    parser = argparse.ArgumentParser(prog="lkecho", description="Print text, like echo.")
    parser.add_argument("text", nargs="+", metavar="TEXT", help="Input text")
    parser.add_argument("-n", dest="omit_newline", action="store_true", help="Do not print newline")
    return parser

def run_echo(args):
    sys.stdout.write(render_echo(args.text, args.omit_newline))

@cli_entry
def echo_main(argv=None):
    run_echo(create_echo_parser().parse_args(argv))

# --- grep ---

def create_grep_parser():
    parser = argparse.ArgumentParser(prog="lkgrep", description="Print lines matching a regular expression, like grep.")
    parser.add_argument("pattern", help="Regular expression to search for")
    parser.add_argument("files", nargs="*", default=[STDIN_MARKER], metavar="FILE", help="Input file(s), '-' for stdin")
    parser.add_argument("-i", "--insensitive", action="store_true", help="Case-insensitive matching")
    parser.add_argument("-r", "--recursive", action="store_true", help="Search directories recursively")
    parser.add_argument("-c", "--count", action="store_true", help="Print a count of selected lines per file")
    parser.add_argument("-v", "--invert-match", dest="invert", action="store_true", help="Select non-matching lines")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Skip files and directories matching this gitignore-style pattern when recursing (repeatable)",
    )
    parser.add_argument("--exclude-from", type=Path, default=None, metavar="FILE", help="Read exclude patterns from FILE")
    return parser

def _write_line(line: str) -> None:
    sys.stdout.write(line if line.endswith("\n") else line + "\n")

def run_grep(args):
    # 1. Configuration errors abort before any input is read
    try:
        pattern = compile_pattern(args.pattern, args.insensitive)
    except PatternError as e:
        report(str(e))
        sys.exit(1)

    try:
        exclude_spec = load_exclude_spec(args.exclude_from, extra_patterns=args.exclude)
    except OSError as e:
        report_error(str(args.exclude_from), e)
        sys.exit(1)

    # 2. Sources
    entries = find_files(args.files, args.recursive, exclude_spec)
    show_names = len(entries) > 1

    # 3. Scan each source, reporting failures and moving on
    failures = 0
    for entry in entries:
        if not entry.ok:
            report(entry.error)
            failures += 1
            continue

        try:
            with open_source(entry.path) as stream:
                matches = find_lines(stream, pattern, args.invert)
        except OSError as e:
            report_error(entry.path, e)
            failures += 1
            continue

        if args.count:
            print(f"{entry.path}:{len(matches)}" if show_names else len(matches))
        else:
            for line in matches:
                _write_line(f"{entry.path}:{line}" if show_names else line)

    if entries and failures == len(entries):
        sys.exit(1)

@cli_entry
def grep_main(argv=None):
    run_grep(create_grep_parser().parse_args(argv))

# --- uniq ---

def create_uniq_parser():
    parser = argparse.ArgumentParser(prog="lkuniq", description="Collapse adjacent duplicate lines, like uniq.")
    parser.add_argument("in_file", nargs="?", default=STDIN_MARKER, metavar="IN_FILE", help="Input file, '-' for stdin")
    parser.add_argument("out_file", nargs="?", default=None, metavar="OUT_FILE", help="Output file (default: stdout)")
    parser.add_argument("-c", "--count", action="store_true", help="Prefix lines by the number of occurrences")
    return parser

def run_uniq(args):
    try:
        with open_source(args.in_file) as stream, open_sink(args.out_file) as out:
            collapse_runs(iter_raw_lines(stream, args.in_file), out, show_count=args.count)
    except OSError as e:
        # Open and read errors carry their filename; anything else failed on the sink
        report_error(e.filename or args.out_file or STDOUT_LABEL, e)
        sys.exit(1)

@cli_entry
def uniq_main(argv=None):
    run_uniq(create_uniq_parser().parse_args(argv))

# --- wc ---

def create_wc_parser():
    parser = argparse.ArgumentParser(prog="lkwc", description="Count lines, words, bytes and characters, like wc.")
    parser.add_argument("files", nargs="*", default=[STDIN_MARKER], metavar="FILE", help="Input file(s), '-' for stdin")
    parser.add_argument("-l", "--lines", action="store_true", help="Show line count")
    parser.add_argument("-w", "--words", action="store_true", help="Show word count")
    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument("-c", "--bytes", action="store_true", help="Show byte count")
    size_group.add_argument("-m", "--chars", action="store_true", help="Show character count")
    return parser

def run_wc(args):
    fields = resolve_fields(args.lines, args.words, args.bytes, args.chars)

    total = FileInfo()
    failures = 0
    for filename in args.files:
        try:
            with open_source(filename) as stream:
                info = count(stream)
        except OSError as e:
            report_error(filename, e)
            failures += 1
            continue

        print(format_counts(info, fields, filename))
        total += info

    if len(args.files) > 1:
        print(format_counts(total, fields, "total"))

    if failures == len(args.files):
        sys.exit(1)

@cli_entry
def wc_main(argv=None):
    run_wc(create_wc_parser().parse_args(argv))

# --- python -m linekit.cli <tool> ---

TOOLS = {
    "echo": (create_echo_parser, run_echo),
    "grep": (create_grep_parser, run_grep),
    "uniq": (create_uniq_parser, run_uniq),
    "wc": (create_wc_parser, run_wc),
}

def create_arg_parser():
    parser = argparse.ArgumentParser(prog="linekit", description="Small Unix-style text tools.")
    subparsers = parser.add_subparsers(dest="tool", required=True, metavar="TOOL")
    for name, (create_parser, run) in TOOLS.items():
        tool_parser = create_parser()
        sub = subparsers.add_parser(name, parents=[tool_parser], add_help=False, help=tool_parser.description)
        sub.set_defaults(run=run)
    return parser

@cli_entry
def main(argv=None):
    args = create_arg_parser().parse_args(argv)
    args.run(args)

if __name__ == "__main__":
    main()
