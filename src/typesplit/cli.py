# src/typesplit/cli.py

"""
typesplit - sort the lines of text files into integers, floats and strings

Description:
    Reads one or more text files, classifies every line as an integer,
    a floating-point number or a string, writes each category to its own
    file ({prefix}integers.txt, {prefix}floats.txt, {prefix}strings.txt)
    and prints short or full statistics per category.

usage: see typesplit -h
"""

from __future__ import annotations

import argparse
import faulthandler
import os
import platform
import sys
import textwrap
import traceback
from pathlib import Path

from colorama import Fore, Style
from colorama import init as colorama_init

from typesplit import __version__ as _ver
from typesplit.config import list_profiles_with_descriptions, load_settings
from typesplit.context import RunConfig, Verbosity
from typesplit.display import print_profiles_with_descriptions
from typesplit.output_manager import OutputManager, resolve_output_path
from typesplit.pipeline import run
from typesplit.runtime import APPLY, CFG
from typesplit.runtime import current as _rt_current
from typesplit.runtime import reset as _rt_reset
from typesplit.utility import (
    ConfigurationError,
    FileReadError,
    FileWriteError,
    UserInputError,
    flatten_dotted,
    typename,
)
from typesplit.workspace import ensure_workspace


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    # Always show full Python tracebacks
    try:
        faulthandler.enable()
    except (ValueError, OSError):
        # stderr without a real file descriptor (captured by a test runner or IDE)
        pass

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not msg.startswith("Error:"):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def _configure_text_streams() -> None:
    # 1) Respect explicit user choice
    if os.environ.get("PYTHONIOENCODING"):
        return

    try:
        # Only touch redirected output (pipes/files), leave TTY as-is
        if not sys.stdout.isatty():
            enc = (getattr(sys.stdout, "encoding", None) or "").lower()

            if platform.system() == "Windows":
                # 2) Windows: force UTF-8 for redirected output
                sys.stdout.reconfigure(encoding="utf-8", errors="replace")
                sys.stderr.reconfigure(encoding="utf-8", errors="replace")
            # 3) POSIX: fix only if clearly unsafe (ASCII)
            elif enc in ("ascii", "us-ascii"):
                sys.stdout.reconfigure(encoding="utf-8", errors="replace")
                sys.stderr.reconfigure(encoding="utf-8", errors="replace")
    except (AttributeError, ValueError, OSError):
        # Captured streams (tests, IDEs) may not support reconfigure()
        pass


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    output files:
      {prefix}integers.txt, {prefix}floats.txt, {prefix}strings.txt
      Empty categories produce no file and no statistics.

    profiles:
      TOML files in $TYPESPLIT_HOME/profiles (default ~/.typesplit/profiles).
      The 'default' profile is used when present; command-line flags win.

    exit codes:
      0 ok, 1 read/write failure, 2 invalid options or profile, 130 interrupted
    """)

    p = argparse.ArgumentParser(
        prog="typesplit",
        description="Sort the lines of text files into integers, floats and strings",
        usage=(
            "typesplit [-o DIR] [-p PREFIX] [-a | --no-append] [-s | -f] [--profile NAME]\n"
            "                 [--quiet] [--report-file FILE] [--no-color] [--debug] FILE [FILE ...]\n"
            "       typesplit --list-profiles\n"
            "       typesplit -h | --help\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("files", nargs="*", metavar="FILE", help="input text files, read in the given order")
    p.add_argument("-o", "--output", default=None, metavar="DIR",
                   help="output directory (default: profile OUTPUT.DIRECTORY, else current directory)")
    p.add_argument("-p", "--prefix", default=None, help="prefix for output file names")
    appending = p.add_mutually_exclusive_group()
    appending.add_argument("-a", "--append", action="store_true", default=None,
                           help="append to existing output files instead of replacing them")
    appending.add_argument("--no-append", action="store_false", dest="append", default=None,
                           help="replace existing output files (overrides a profile's OUTPUT.APPEND)")
    stats = p.add_mutually_exclusive_group()
    stats.add_argument("-s", "--short-stats", action="store_true", help="short statistics (count only)")
    stats.add_argument("-f", "--full-stats", action="store_true", help="full statistics (default)")
    p.add_argument("--profile", default=None, help="profile name from the workspace")
    p.add_argument("--list-profiles", action="store_true", help="list available profiles and exit")
    p.add_argument("--quiet", action="store_true", help="do not print statistics to the screen")
    p.add_argument("--report-file", default=None, metavar="FILE",
                   help="also append plain-text statistics to FILE")
    p.add_argument("--no-color", action="store_true", help="disable colored output")
    p.add_argument("--debug", action="store_true", help="show trace lines and full tracebacks")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")

    return p


def _resolve_verbosity(args) -> Verbosity:
    if args.short_stats:
        return Verbosity.SHORT
    if args.full_stats:
        return Verbosity.FULL
    try:
        return Verbosity.parse(CFG("STATISTICS.MODE", Verbosity.FULL.value))
    except ValueError as e:
        raise ConfigurationError(f"profile STATISTICS.MODE: {e}") from None


def build_run_config(args, cwd: Path | None = None) -> RunConfig:
    """
    Merge command-line flags over the applied profile into a RunConfig.

    Precedence for each option: explicit flag, then profile value, then
    built-in default (current directory, empty prefix, overwrite, full stats).
    """
    cwd = cwd or Path.cwd()

    if not args.files:
        raise ConfigurationError("no input files given (see typesplit -h)")

    prefix = args.prefix if args.prefix is not None else CFG("OUTPUT.PREFIX", "")
    if "/" in prefix or os.sep in prefix:
        raise ConfigurationError(f"prefix must not contain a path separator: {prefix!r}")

    out = args.output if args.output is not None else CFG("OUTPUT.DIRECTORY", None)
    output_dir = resolve_output_path(out, cwd) if out else cwd

    append = args.append if args.append is not None else bool(CFG("OUTPUT.APPEND", False))

    return RunConfig(
        input_paths=tuple(Path(f) for f in args.files),
        output_dir=output_dir,
        prefix=prefix,
        append=append,
        verbosity=_resolve_verbosity(args),
    )


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except (FileReadError, FileWriteError) as e:
        _print_user_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        # Only show traceback in debug mode
        debug = "--debug" in (argv if argv is not None else sys.argv) or _rt_current().debug
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


def _debug_dump_settings(selected) -> None:
    print(f"[debug] active profile: {selected.name}", file=sys.stderr)
    src_path = getattr(selected, "_source", None)
    if src_path:
        print(f"[debug] profile file: {src_path}", file=sys.stderr)
    flat = flatten_dotted(selected.as_dict())
    for k in sorted(flat.keys(), key=str.lower):
        v = flat[k]
        print(f"        {k:.<40} {v!r} ({typename(v)})", file=sys.stderr)


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)
    _configure_text_streams()

    parser = _build_parser()
    args = parser.parse_args(argv)

    rt = _rt_reset()
    rt.debug = bool(args.debug)
    _install_loud_error_handlers(args.debug)

    if args.list_profiles:
        root = ensure_workspace()
        print(f"Profiles in {root / 'profiles'}:")
        print_profiles_with_descriptions(list_profiles_with_descriptions())
        return 0

    # Load & apply profile: explicit --profile, else 'default' when present
    selected = load_settings(args.profile)
    APPLY(selected)

    # CLI flags override profile flags
    if args.debug:
        rt.debug = True
    if args.no_color or not sys.stdout.isatty():
        rt.color = False

    if rt.debug:
        _debug_dump_settings(selected)

    config = build_run_config(args)

    if rt.debug:
        print(f"[debug] inputs: {', '.join(str(p) for p in config.input_paths)}", file=sys.stderr)
        print(f"[debug] output: {config.output_dir} prefix={config.prefix!r} "
              f"append={config.append} stats={config.verbosity.value}", file=sys.stderr)

    om = OutputManager(report_file=args.report_file, quiet=args.quiet)
    try:
        run(config, om)
    finally:
        om.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
