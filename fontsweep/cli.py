#!/usr/bin/env python3
"""
cli.py
Command-line interface for fontsweep.
Parses arguments, loads config, sets up logging and runs one command:
scan, copy, fonts (list font files) or parse (font names and styles).
"""
from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from .aggregate import scan_directory
from .config import DEFAULT_CONFIG_NAME, LOG_LEVELS, find_config, load_config
from .copier import copy_tree
from .discover import discover_fonts
from .fontmeta import parse_fonts_directory
from .report import format_copy_report, format_font_listing, format_font_report, format_scan_report
from .types import Config, TraversalConfig
from .util import dumps_json, utc_datestr, write_json

log = logging.getLogger("fontsweep")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fontsweep",
        description="fontsweep: inventory a directory tree and copy its font files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "--config",
        default=None,
        help=f"path to a TOML config (default: ./{DEFAULT_CONFIG_NAME} when present)",
    )
    ap.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="override runtime.log_level")
    sub = ap.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="list and summarize a directory")
    scan.add_argument("root")
    scan.add_argument("-r", "--recursive", action="store_true", default=None, help="descend into subdirectories")
    scan.add_argument("--hidden", action="store_true", default=None, help="include dotfiles")
    scan.add_argument("--max-depth", type=int, default=None, help="deepest level to enter (0 = root's children only)")
    scan.add_argument("--follow-symlinks", action="store_true", default=None)
    scan.add_argument("--filter", action="append", dest="filters", default=None,
                      help="keep entries matching name substring, extension or content type (repeatable)")
    scan.add_argument("--max-size-mb", type=int, default=None, help="skip files larger than this")
    scan.add_argument("--json", action="store_true", help="print the result as JSON")

    copy = sub.add_parser("copy", help="copy font files into one flat directory")
    copy.add_argument("source")
    copy.add_argument("target")
    copy.add_argument("--overwrite", action="store_true", default=None, help="replace existing files in target")
    copy.add_argument("--json", action="store_true")

    fonts = sub.add_parser("fonts", help="list font files under a directory")
    fonts.add_argument("directory")
    fonts.add_argument("--json", action="store_true")

    parse = sub.add_parser("parse", help="extract font names and styles")
    parse.add_argument("directory")
    parse.add_argument("--json", action="store_true")
    return ap


def validate_arguments(args) -> None:
    """Validate CLI arguments and provide helpful error messages."""
    if getattr(args, "max_depth", None) is not None and args.max_depth < 0:
        print(f"❌ Error: --max-depth must be zero or positive, got {args.max_depth}")
        print(f"💡 Hint: leave it out for unlimited depth")
        sys.exit(1)
    if getattr(args, "max_size_mb", None) is not None and args.max_size_mb < 0:
        print(f"❌ Error: --max-size-mb must be zero or positive, got {args.max_size_mb}")
        sys.exit(1)


def traversal_config_from(cfg: Config, args) -> TraversalConfig:
    base = cfg.traversal_config()
    max_size = base.max_entry_size
    if args.max_size_mb is not None:
        max_size = args.max_size_mb * 1024 * 1024 if args.max_size_mb > 0 else None
    return TraversalConfig(
        recursive=base.recursive if args.recursive is None else args.recursive,
        include_hidden=base.include_hidden if args.hidden is None else args.hidden,
        max_depth=base.max_depth if args.max_depth is None else args.max_depth,
        follow_symlinks=base.follow_symlinks if args.follow_symlinks is None else args.follow_symlinks,
        name_filters=base.name_filters if args.filters is None else frozenset(args.filters),
        max_entry_size=max_size,
    )


def run_command(cfg: Config, args):
    """Return (result, rendered text, failed flag) for the selected command."""
    copy_max_size = cfg.copy_max_file_size_mb * 1024 * 1024
    if args.command == "scan":
        result = scan_directory(Path(args.root), traversal_config_from(cfg, args))
        return result, format_scan_report(result), result.stats.error_count > 0
    if args.command == "copy":
        overwrite = cfg.copy_overwrite if args.overwrite is None else args.overwrite
        result = copy_tree(
            Path(args.source), Path(args.target), overwrite,
            max_depth=cfg.copy_max_depth, max_file_size=copy_max_size,
        )
        return result, format_copy_report(result), bool(result.failed or result.fatal_errors)
    if args.command == "fonts":
        result = discover_fonts(Path(args.directory), max_depth=cfg.copy_max_depth, max_file_size=copy_max_size)
        return result, format_font_listing(result), bool(result.error_messages)
    result = parse_fonts_directory(Path(args.directory), max_depth=cfg.copy_max_depth, max_file_size=copy_max_size)
    return result, format_font_report(result), bool(result.failed_parses or result.errors)


def main(argv=None) -> int:
    try:
        args = build_parser().parse_args(argv)
        validate_arguments(args)

        cfg_path = None
        try:
            cfg_path = find_config(args.config)
            cfg = load_config(cfg_path)
        except FileNotFoundError as e:
            print(f"❌ Error: {e}")
            print(f"💡 Hint: Check the path or drop --config to use defaults")
            return 1
        except Exception as e:
            print(f"❌ Error: Invalid configuration file {cfg_path}: {e}")
            print(f"💡 Hint: Check TOML syntax and value types in {cfg_path}")
            return 1

        logging.basicConfig(
            level=args.log_level or cfg.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        log.debug("config: %s", cfg_path or "built-in defaults")

        result, text, failed = run_command(cfg, args)
        if args.json:
            print(dumps_json(result))
        else:
            print(text, end="")

        if cfg.summary_dir is not None:
            summary = cfg.summary_dir / f"{args.command}-{utc_datestr('%Y%m%d-%H%M%S')}.json"
            write_json(summary, result)
            log.info("summary written to %s", summary)

        if failed:
            print(f"[warn] {args.command} finished with errors.", file=sys.stderr)
            return 1
        return 0

    except KeyboardInterrupt:
        print(f"\n\n⚡ Interrupted by user.")
        return 130
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        print(f"💡 Hint: Run with --log-level DEBUG for details")
        return 1


if __name__ == "__main__":
    sys.exit(main())
