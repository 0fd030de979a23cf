"""CLI entrypoints for signalgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import SignalgenError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signalgen",
        description="Generate C++ connect helpers for Qt signals declared in a bridge description.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate signal declarations and connect helpers.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "bridge",
        help="Path to the YAML bridge description.",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help="Path to .signalgen.yml (defaults to the bridge's directory).",
    )
    generate_parser.add_argument(
        "--header",
        type=Path,
        default=None,
        help="Write declarations to this file instead of stdout.",
    )
    generate_parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Write definitions to this file instead of stdout.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for signalgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "generate":
        bridge_path = Path(args.bridge).expanduser()
        try:
            config = load_config(Path(args.config) if args.config else bridge_path.resolve().parent)
        except SignalgenError as exc:
            parser.exit(1, f"{exc}\n")
        configure_logging(
            verbose=bool(args.verbose) or config.logging.verbose,
            log_file=config.logging.log_file,
        )

        orchestrator = Orchestrator()
        try:
            report = orchestrator.run(
                str(bridge_path),
                header_path=args.header,
                source_path=args.source,
                config=config,
            )
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except SignalgenError as exc:
            parser.exit(1, f"signalgen generate failed: {exc}\nRun with --verbose for more details.\n")

        header_target = args.header or config.output.header
        source_target = args.source or config.output.source
        if header_target is None:
            sys.stdout.write(report.header)
        if source_target is None:
            if header_target is None and report.header and report.source:
                sys.stdout.write("\n")
            sys.stdout.write(report.source)
        if not report.ok:
            owners = ", ".join(failure.owner for failure in report.errors)
            parser.exit(1, f"signalgen generate failed for: {owners}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
