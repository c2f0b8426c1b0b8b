#!/usr/bin/env python3
"""py-dep-licenses: list a GitHub repository's Python dependencies with their licenses.

Subcommands:
  scan <github_url>   print a markdown (or JSON) license report
  mcp                 serve the list_dependencies tool over MCP
"""

import asyncio
import json
import logging
import sys

from args import parse_args
from cli_config import apply_cli_overrides, apply_config_overrides
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import ExitCodes, load_yaml_config
from errors import InvalidLocator, ManifestFetchTransportFailure
from report import format_report, result_to_dict

logger = logging.getLogger(__name__)


def _write_output(text, path):
    if not path:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        logger.error("Couldn't write report to %s: %s", path, e)
        sys.exit(ExitCodes.INVALID_INPUT.value)
    logger.info("Report written to %s", path)


def run_scan(args):
    """Resolve one repository and emit the report. Exits with an ExitCodes value."""
    # Imported here so `--help` stays fast.
    from cli_mcp import build_resolver  # pylint: disable=import-outside-toplevel

    resolver = build_resolver()
    try:
        result = asyncio.run(resolver.resolve_url(args.github_url))
    except InvalidLocator as e:
        logger.error("%s: %s", e, args.github_url)
        sys.exit(ExitCodes.INVALID_INPUT.value)
    except ManifestFetchTransportFailure as e:
        logger.error("Error fetching dependencies: %s", e)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)

    if args.OUTPUT_FORMAT == "json":
        text = json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)
    else:
        text = format_report(result)
    _write_output(text, args.OUTPUT)
    sys.exit(ExitCodes.SUCCESS.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)

    if args.command == "mcp":
        from cli_mcp import run_mcp_server  # pylint: disable=import-outside-toplevel
        run_mcp_server(args)
        return

    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    apply_config_overrides(load_yaml_config(args.CONFIG))
    apply_cli_overrides(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.command),
        )
    run_scan(args)


if __name__ == "__main__":
    main()
