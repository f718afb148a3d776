"""Command-line interface for jsxlite."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Any

from jsxlite.errors import ParseError

FORMATS = ("tree", "source", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    indent: int
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="jsxlite",
        description="Parse a jsxlite template and print its tree",
    )
    p.add_argument("input", help="Input template file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: tree)",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="JSON indentation (default: 2)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover jsxlite.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump parse tree to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "jsxlite.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Output format: config < CLI
    fmt = "tree"
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid output format in config: {cfg_format!r} "
                f"(expected one of {', '.join(FORMATS)})"
            )
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    # JSON indent: config < CLI
    indent = 2
    cfg_indent = cfg_output.get("indent")
    if isinstance(cfg_indent, int) and not isinstance(cfg_indent, bool):
        indent = cfg_indent
    if args.indent is not None:
        indent = args.indent

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        indent=indent,
        debug=args.debug,
    )


def render_file(options: CliOptions) -> str:
    """Read and parse a template file, returning it in the requested format."""
    from jsxlite.debug import dump_tree
    from jsxlite.parser import parse
    from jsxlite.serialize import to_data, to_source

    source = options.input_file.read_text(encoding="utf-8")
    doc = parse(source, str(options.input_file))

    if options.debug:
        dump_tree(doc, file=sys.stderr)

    if options.format == "source":
        return to_source(doc) + "\n"
    if options.format == "json":
        return json.dumps(to_data(doc), indent=options.indent) + "\n"

    buf = StringIO()
    dump_tree(doc, file=buf)
    return buf.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = render_file(options)
    except ParseError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except RecursionError:
        # json.dumps recurses once per nesting level
        print("error: template nested too deeply for JSON output", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())
