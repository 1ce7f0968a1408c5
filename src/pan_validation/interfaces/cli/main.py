import argparse
import importlib
import json
import logging
from pathlib import Path
from typing import List, Optional

import colorlog

try:
    # Prefer package-defined version
    from pan_validation import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover - defensive fallback
    _PACKAGE_VERSION = None  # type: ignore[assignment]
    try:
        # Fallback to installed package metadata
        from importlib.metadata import version as _pkg_version, PackageNotFoundError

        _PACKAGE_VERSION = _pkg_version("pan-validation-tools")  # type: ignore[assignment]
    except PackageNotFoundError:
        _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve_report_dir(option, default_dir: Path) -> Path:
    """Map a ``nargs='?'`` report option to a directory (True means default)."""
    if option is True:
        return default_dir
    report_dir = Path(option)
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate every raw value of an input file and report the results.

    Returns:
        0 if the file was validated (and, with --fail-on-invalid, no value is invalid)
        1 if --fail-on-invalid is set and invalid values were found
        2 if the input or settings could not be used
    """
    from pan_validation.core.utils import get_report_paths
    from pan_validation.ingestion import load_raw_values
    from pan_validation.validation.config import Settings, load_settings

    registry = importlib.import_module("pan_validation.validation.registry")

    # Resolve settings: YAML file first, then explicit flags
    config_arg = getattr(args, "config", None)
    try:
        settings = load_settings(Path(config_arg)) if config_arg else Settings()
        column = getattr(args, "column", None) or settings.input_column
        max_examples = getattr(args, "max_examples", None)
        if max_examples is None:
            max_examples = settings.max_examples
        if max_examples < 0:
            raise ValueError(f"--max-examples must be >= 0, got {max_examples}")
    except (FileNotFoundError, ValueError) as e:
        logging.error("Invalid settings: %s", e)
        return 2

    input_path = Path(args.input).resolve()
    try:
        values = load_raw_values(input_path, column=column)
    except FileNotFoundError as e:
        logging.error("%s", e)
        return 2
    except ValueError as e:
        logging.error("Cannot load input: %s", e)
        return 2

    logging.info("Validating %d values from %s...", len(values), input_path.name)
    report = registry.run_validation(
        values,
        max_examples=max_examples,
        mask_char=settings.mask_char,
        progress=bool(getattr(args, "progress", False)),
        source=input_path,
    )

    # Print console report
    registry.print_report(report)

    report_opt = getattr(args, "report", False)
    report_json_opt = getattr(args, "report_json", False)
    export_opt = getattr(args, "export_csv", None)
    try:
        # Generate markdown report if requested
        if report_opt:
            report_dir = _resolve_report_dir(report_opt, input_path.parent)
            report_path, _ = get_report_paths(input_path, report_dir)
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_markdown())
            logging.info("Markdown report saved: %s", report_path)

        # Generate JSON report if requested
        if report_json_opt:
            report_dir = _resolve_report_dir(report_json_opt, input_path.parent)
            _, report_path = get_report_paths(input_path, report_dir)
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_json())
            logging.info("JSON report saved: %s", report_path)

        if export_opt:
            for path in report.export_csv(Path(export_opt)):
                logging.info("CSV export saved: %s", path)
    except OSError as e:
        logging.error("Failed to write reports: %s", e)
        return 2

    if report.has_invalid():
        logging.warning(
            "%d of %d values are invalid", report.stats.invalid, report.stats.total
        )
        if getattr(args, "fail_on_invalid", False):
            return 1

    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Look up one or more values and print one JSON object per value."""
    registry = importlib.import_module("pan_validation.validation.registry")

    for pan in args.pans:
        lookup = registry.check_pan(pan)
        print(json.dumps(lookup.to_dict(), ensure_ascii=False))
    return 0


def cmd_mcp_server(args: argparse.Namespace) -> int:
    """Start the MCP server.

    Default: stdio. If --port is set, run HTTP transport at host:port.
    """
    try:
        mcp_server = importlib.import_module("pan_validation.interfaces.mcp.server")
    except (ModuleNotFoundError, AttributeError, ImportError, RuntimeError) as e:
        logging.error(
            "Failed to import MCP server. Ensure 'mcp' is installed. Error: %s",
            e,
        )
        return 3
    port = getattr(args, "port", None)
    host = getattr(args, "host", None) or "127.0.0.1"
    if port:
        logging.info("Starting MCP HTTP server on %s:%s", host, port)
    else:
        logging.info("Starting MCP stdio server")
    try:
        if port:
            mcp_server.run_http(host=host, port=int(port))
        else:
            mcp_server.run()
    except KeyboardInterrupt:
        pass
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pan-validation",
        description=f"PAN Validation Tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate every PAN in an input file")
    p_validate.add_argument(
        "--input",
        required=True,
        help="CSV/TSV file with a header row, or a .txt file with one value per line",
    )
    p_validate.add_argument(
        "--column",
        default=None,
        help="Column holding raw values (defaults to settings, then 'pan_raw')",
    )
    p_validate.add_argument(
        "--config",
        default=None,
        help="Path to a YAML settings file (e.g. config/pan_validation.yaml)",
    )
    p_validate.add_argument(
        "--max-examples",
        type=int,
        default=None,
        help="Maximum masked example rows (defaults to settings, then 25)",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed Markdown report. Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed JSON report. Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--export-csv",
        default=None,
        help="Directory for summary/reason/example/pair CSV exports",
    )
    p_validate.add_argument(
        "--progress", action="store_true", help="Show a progress bar while validating"
    )
    p_validate.add_argument(
        "--fail-on-invalid",
        action="store_true",
        help="Exit with status 1 when any value is invalid",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_check = sub.add_parser("check", help="Check one or more PANs and print JSON results")
    p_check.add_argument("pans", nargs="+", help="Values to check (quote values with spaces)")
    p_check.set_defaults(func=cmd_check)

    p_mcp = sub.add_parser("mcp-server", help="Run minimal MCP server (stdio or HTTP)")
    p_mcp.add_argument(
        "--port",
        default=None,
        help="If set, run HTTP transport on the given port",
    )
    p_mcp.add_argument(
        "--host",
        default=None,
        help="Host to bind for HTTP transport (default 127.0.0.1)",
    )
    p_mcp.set_defaults(func=cmd_mcp_server)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
