"""
Minimal MCP server exposing PAN validation tools.

Tools:
 - check_pan: ad-hoc lookup of one value
 - validate_pans: batch validation of a list of values
 - validate_file: batch validation of a CSV/TSV/TXT file
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pan_validation.ingestion import load_raw_values
from pan_validation.validation.config import DEFAULT_INPUT_COLUMN, DEFAULT_MAX_EXAMPLES
from pan_validation.validation.models import ValidationReport
from pan_validation.validation.registry import check_pan as _check_pan
from pan_validation.validation.registry import run_validation

try:
    from mcp.server.fastmcp import FastMCP
except Exception as exc:
    raise RuntimeError(
        "The 'mcp' package is required for the MCP server. Install with: pip install mcp"
    ) from exc


_SERVER = FastMCP("pan-validation-tools")

# Configure logging for MCP server
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr)  # MCP uses stdout for protocol
    ],
)
logger = logging.getLogger(__name__)


def _report_payload(report: ValidationReport) -> Dict[str, Any]:
    """Shareable report content (no raw or unmasked values)."""
    payload = json.loads(report.to_json())
    payload.pop("metadata", None)
    return payload


@_SERVER.tool("check_pan")
async def check_pan(pan: str) -> Dict[str, Any]:
    """Check one PAN and return its status and reason codes."""
    return _check_pan(pan).to_dict()


@_SERVER.tool("validate_pans")
async def validate_pans(
    values: List[Optional[str]], max_examples: int = DEFAULT_MAX_EXAMPLES
) -> Dict[str, Any]:
    """Validate a list of values and return summary, reasons, examples and pairs."""
    try:
        report = run_validation(values, max_examples=max_examples)
        return _report_payload(report)
    except ValueError as e:
        logger.error("Error in validate_pans: %s", e)
        return {"error": str(e)}


@_SERVER.tool("validate_file")
async def validate_file(
    path: str,
    column: str = DEFAULT_INPUT_COLUMN,
    max_examples: int = DEFAULT_MAX_EXAMPLES,
) -> Dict[str, Any]:
    """Validate a CSV/TSV/TXT file readable by the server."""
    try:
        input_path = Path(path)
        values = load_raw_values(input_path, column=column)
        report = run_validation(values, max_examples=max_examples, source=input_path)
        payload = _report_payload(report)
        payload["source"] = input_path.name
        return payload
    except (FileNotFoundError, ValueError) as e:
        logger.error("Error in validate_file: %s", e)
        return {"error": str(e)}


# Transport functions
def run() -> None:
    """Run MCP server over stdio."""
    logger.info("Starting MCP server over stdio")
    asyncio.run(_SERVER.run_stdio_async())


async def _run_http(host: str, port: int) -> None:
    """Start HTTP server with explicit uvicorn configuration."""
    try:
        import uvicorn
    except ImportError:
        raise RuntimeError("uvicorn is required for HTTP mode: pip install uvicorn")

    app = _SERVER.streamable_http_app()
    config = uvicorn.Config(
        app,
        host=host,
        port=int(port),
        log_level="info",
    )
    server = uvicorn.Server(config)
    await server.serve()


def run_http(*, host: str = "127.0.0.1", port: int = 8765) -> None:
    """Run MCP server over HTTP."""
    logger.info("Starting HTTP MCP server on %s:%d", host, port)
    asyncio.run(_run_http(host, port))
