"""
Command-line interface for mediameta.

Usage:
  mediameta video.mp4                         # Default mode
  mediameta --json video.mp4                  # JSON record
  mediameta -q *.mp4                          # Quick summary
  mediameta -o report.json *.mp4              # JSON export
  mediameta --mediainfo-bin /opt/mi/mediainfo video.mp4
"""

from __future__ import annotations

import argparse
import dataclasses
import sys

from mediameta._version import __version__
from mediameta.config import MediaMetaConfig, load_config
from mediameta.errors import MediaMetaError
from mediameta.extractors import MediaInfoTool
from mediameta.formatters import format_default, format_json, format_json_list, format_quiet
from mediameta.models import MediaInfo
from mediameta.utils import print_dependency_status


def build_config(args: argparse.Namespace) -> MediaMetaConfig:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.mediainfo_bin:
        config = dataclasses.replace(config, mediainfo_bin=args.mediainfo_bin)
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mediameta CLI."""
    parser = argparse.ArgumentParser(
        prog="mediameta",
        description="Extract normalized media metadata using mediainfo.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  (default)    Sectioned report: general, video, audio, menu
  --json       Normalized record as JSON
  -q/--quiet   One line per file

Configuration:
  --mediainfo-bin  Path to mediainfo if it is not in $PATH
                   (also MEDIAMETA_MEDIAINFO_BIN or ~/.mediameta/config.yaml)

Utilities:
  --status     Show dependency status
        """,
    )
    parser.add_argument("files", nargs="*", help="Media file(s) to inspect")
    parser.add_argument("-o", "--output", help="Save records to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--mediainfo-bin",
        metavar="PATH",
        help="The path to the mediainfo binary if it is not in the system $PATH",
    )
    parser.add_argument("--config", metavar="FILE", help="YAML config file to load")

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--json", action="store_true", help="Print records as JSON")
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument("--status", action="store_true", help="Show dependency status")

    args = parser.parse_args(argv)
    config = build_config(args)

    if args.status:
        print_dependency_status(config)
        return 0

    if not args.files:
        parser.error("the following arguments are required: files")

    tool = MediaInfoTool(config)
    results: dict[str, MediaInfo] = {}
    errors = 0

    for file_path in args.files:
        try:
            info = tool.extract(file_path)
        except MediaMetaError as e:
            print(f"Error analyzing {file_path}: {e}", file=sys.stderr)
            errors += 1
            continue

        results[file_path] = info
        if args.json:
            print(format_json(info))
        elif args.quiet:
            print(format_quiet(info, file_path))
        else:
            print(format_default(info, file_path))
            print()

    if args.output and results:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_json_list(results))
        print(f"Report saved to: {args.output}")

    return 1 if errors > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
