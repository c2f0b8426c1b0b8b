"""MCP server exposing dependency license analysis via the official MCP Python SDK.

This module implements a single tool:
  - list_dependencies(github_url) -> markdown report

Transport defaults to stdio JSON-RPC. If --host/--port are provided via CLI,
the server runs with streamable HTTP transport instead.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from analysis.license_classifier import LicenseClassifier, build_license_tables
from analysis.resolution import DependencyResolver
from cli_config import apply_cli_overrides, apply_config_overrides
from common.logging_utils import configure_logging
from constants import Constants, load_yaml_config
from errors import DepLicensesError
from mcp_schemas import LIST_DEPENDENCIES_DESCRIPTION, LIST_DEPENDENCIES_INPUT
from mcp_validate import SchemaError, validate_input
from registry.pypi import PyPIClient
from report import format_report
from repository.github import GitHubRawClient

logger = logging.getLogger(__name__)


def build_resolver() -> DependencyResolver:
    """Wire the production collaborators from the current Constants."""
    tables = build_license_tables(Constants.EXTRA_FREE_LICENSES, Constants.EXTRA_PAID_LICENSES)
    return DependencyResolver(
        fetcher=GitHubRawClient(),
        license_lookup=PyPIClient(),
        classifier=LicenseClassifier(tables),
    )


async def list_dependencies(github_url: Any, resolver: DependencyResolver) -> str:
    """Tool body: validate input, resolve, format.

    Raises:
        RuntimeError: With a single descriptive message; FastMCP reports it
            to the client as a tool error.
    """
    try:
        validate_input(LIST_DEPENDENCIES_INPUT, {"github_url": github_url})
    except SchemaError as se:
        raise RuntimeError(f"GitHub URL is required and must be a string. {se}") from se

    try:
        result = await resolver.resolve_url(github_url)
    except DepLicensesError as e:
        logger.error("Failed to get dependencies for %s: %s", github_url, e)
        raise RuntimeError(f"Failed to get dependencies: {e}") from e
    return format_report(result)


def create_server(resolver: Optional[DependencyResolver] = None) -> FastMCP:
    mcp = FastMCP(Constants.SERVER_NAME)
    active_resolver = resolver or build_resolver()

    @mcp.tool(name=Constants.TOOL_NAME, title="List Dependencies", description=LIST_DEPENDENCIES_DESCRIPTION)
    async def list_dependencies_tool(github_url: str) -> str:
        return await list_dependencies(github_url, active_resolver)

    return mcp


def run_mcp_server(args) -> None:
    configure_logging(getattr(args, "LOG_LEVEL", None), getattr(args, "LOG_FILE", None))
    apply_config_overrides(load_yaml_config(getattr(args, "CONFIG", None)))
    apply_cli_overrides(args)

    mcp = create_server()
    logger.info("%s %s starting", Constants.SERVER_NAME, Constants.SERVER_VERSION)

    host = getattr(args, "MCP_HOST", None)
    port = getattr(args, "MCP_PORT", None)
    if host and port:
        mcp.settings.host = host
        mcp.settings.port = int(port)
        mcp.run(transport="streamable-http")
    else:
        mcp.run()  # defaults to stdio
