"""CLI entrypoints for dcpquery commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import OUTPUT_FORMATS, load_config
from .engine import SUMMARY_FORMAT, QueryEngine
from .errors import ConfigError, QueryFailedError, RegistryError
from .formatters import format_results
from .logging import configure_logging, get_logger
from .registry import load_registry
from .selector import parse_selector

DEFAULT_REGISTRY_PATH = Path("registry")


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
        prog="dcpquery",
        description="Query design-system registries with CSS-like selectors.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write diagnostics to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    query_parser = subparsers.add_parser(
        "query",
        help="Run a selector such as 'components[category=actions]' against a registry.",
    )
    _add_verbose_option(query_parser, suppress_default=True)
    query_parser.add_argument(
        "selector",
        help="Selector of the form type[property][property=value] (types: components, tokens, usage).",
    )
    query_parser.add_argument(
        "--registry",
        default=None,
        help="Registry file or directory containing registry.json (defaults to ./registry).",
    )
    query_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to the configured format or 'default').",
    )
    query_parser.add_argument(
        "--summary",
        action="store_true",
        help="Reduce component and token results to counts and samples.",
    )
    query_parser.add_argument(
        "--metadata",
        action="store_true",
        help="Wrap results with query metadata.",
    )
    query_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output.",
    )
    query_parser.add_argument(
        "--output",
        default=None,
        help="Write the rendered results to this file instead of stdout.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for dcpquery commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )
    logger = get_logger("cli")

    if args.command == "query":
        try:
            config = load_config(Path.cwd())
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")

        registry_path = Path(args.registry) if args.registry else (
            config.registry_path or DEFAULT_REGISTRY_PATH
        )
        logger.debug("Querying registry at %s", registry_path)
        logger.debug("Selector: %s", args.selector)

        try:
            registry = load_registry(registry_path)
        except RegistryError as exc:
            parser.exit(1, f"{exc}\n")

        summary = bool(args.summary) or config.output.summary
        include_metadata = bool(args.metadata) or config.output.include_metadata
        try:
            results = QueryEngine(registry).query(
                args.selector,
                include_metadata=include_metadata,
                format=SUMMARY_FORMAT if summary else None,
            )
        except QueryFailedError as exc:
            parser.exit(1, f"{exc}\n")

        fmt = args.format or config.output.format
        rendered = format_results(
            results,
            parse_selector(args.selector).type,
            fmt,
            pretty=bool(args.pretty) or config.output.pretty,
        )
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(rendered + "\n", encoding="utf-8")
            print(f"Results written to {_relativize(output_path)}")
        else:
            print(rendered)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
