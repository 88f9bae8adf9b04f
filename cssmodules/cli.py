"""CLI entrypoints for cssmodules commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from .config import load_config
from .errors import ConfigError, InternalError
from .exports import exports_from_payload, serialize_exports, serialize_modules
from .graph import StaticModuleGraph
from .ident import LocalIdentGenerator
from .logging import configure_logging, get_logger
from .models import LocalsConvention
from .url import normalize_url

logger = get_logger("cli")


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
        prog="cssmodules",
        description="Generate CSS Modules identifiers and export code.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .cssmodules.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ident_parser = subparsers.add_parser(
        "ident",
        help="Print the scoped identifier for local class names.",
    )
    _add_verbose_option(ident_parser, suppress_default=True)
    ident_parser.add_argument("file", help="Source stylesheet path used for hashing.")
    ident_parser.add_argument("locals", nargs="+", help="Local class names to rename.")

    exports_parser = subparsers.add_parser(
        "exports",
        help="Render module.exports code from a JSON description of exports and graph.",
    )
    _add_verbose_option(exports_parser, suppress_default=True)
    exports_parser.add_argument(
        "input",
        help="JSON file with module/exports/graph, or '-' to read stdin.",
    )
    exports_parser.add_argument(
        "--convention",
        default=None,
        help="Override the configured locals convention (asIs, camelCase, camelCaseOnly, dashes, dashesOnly).",
    )

    url_parser = subparsers.add_parser(
        "normalize-url",
        help="Normalize raw url() payloads.",
    )
    _add_verbose_option(url_parser, suppress_default=True)
    url_parser.add_argument("values", nargs="+", help="Raw url token payloads.")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cssmodules commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")
    logger.debug("Using configuration rooted at %s", config.root)

    if args.command == "ident":
        generator = LocalIdentGenerator(config)
        try:
            for local in args.locals:
                print(generator.generate(local, args.file))
        except ConfigError as exc:
            parser.exit(1, f"Invalid configuration: {exc}\n")
    elif args.command == "exports":
        try:
            payload = _read_payload(args.input)
            conventions = (
                LocalsConvention.from_name(args.convention)
                if args.convention
                else config.modules.locals_convention
            )
        except (OSError, ValueError) as exc:
            parser.exit(1, f"Could not read exports input: {exc}\n")
        except ConfigError as exc:
            parser.exit(1, f"Invalid configuration: {exc}\n")
        status = _run_exports(parser, payload, conventions)
        if status:
            parser.exit(status)
    elif args.command == "normalize-url":
        for value in args.values:
            print(normalize_url(value))
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, config=config)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_exports(
    parser: argparse.ArgumentParser,
    payload: Dict[str, Any],
    conventions: LocalsConvention,
) -> int:
    try:
        graph = StaticModuleGraph.from_payload(payload.get("graph") or {})
        if "modules" in payload:
            modules = payload["modules"]
            if not isinstance(modules, dict):
                raise ValueError("'modules' must map module ids to exports")
            tables = {module: exports_from_payload(raw) for module, raw in modules.items()}
        else:
            tables = None
            module = payload.get("module")
            if not isinstance(module, str):
                raise ValueError("'module' must be a string")
            exports = exports_from_payload(payload.get("exports") or {})
    except ValueError as exc:
        parser.exit(1, f"Could not read exports input: {exc}\n")

    if tables is None:
        try:
            sys.stdout.write(serialize_exports(exports, module, graph, conventions))
        except InternalError as exc:
            parser.exit(1, f"cssmodules internal error: {exc}\n")
        return 0

    report = serialize_modules(tables, graph, conventions)
    for module_id, code in report.outputs.items():
        sys.stdout.write(f"// {module_id}\n{code}")
    for module_id, error in report.errors.items():
        sys.stderr.write(f"cssmodules internal error in {module_id}: {error.detail}\n")
    return 0 if report.ok else 1


def _read_payload(source: str) -> Dict[str, Any]:
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("exports input must be a JSON object")
    return data


if __name__ == "__main__":
    main(sys.argv[1:])
