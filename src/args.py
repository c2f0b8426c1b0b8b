"""Argument parsing functionality for py-dep-licenses."""

import argparse


def _add_common_arguments(parser):
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--branch",
                        dest="BRANCH",
                        help="Primary branch to read manifests from (default: main)",
                        action="store",
                        type=str)
    parser.add_argument("--fallback-branch",
                        dest="FALLBACK_BRANCH",
                        help="Branch tried when a manifest is absent on the primary branch (default: master)",
                        action="store",
                        type=str)
    parser.add_argument("--batch-size",
                        dest="BATCH_SIZE",
                        help="Number of concurrent license lookups per batch (default: 5)",
                        action="store",
                        type=int)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="Timeout in seconds applied to all HTTP requests",
                        action="store",
                        type=float)


def build_parser():
    """Build the top-level parser with ``scan`` and ``mcp`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="py-dep-licenses",
        description="Python dependency license checker for GitHub repositories",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Report dependency licenses for a GitHub repository")
    scan.add_argument("github_url",
                      help="GitHub URL of the repository, e.g. https://github.com/user/repo")
    scan.add_argument("-f", "--format",
                      dest="OUTPUT_FORMAT",
                      help="Output format (default: text)",
                      action="store",
                      type=str.lower,
                      choices=['text', 'json'],
                      default='text')
    scan.add_argument("-o", "--output",
                      dest="OUTPUT",
                      help="Write the report to this file instead of stdout",
                      action="store",
                      type=str)
    _add_common_arguments(scan)

    mcp = subparsers.add_parser("mcp", help="Run the MCP server (stdio by default)")
    mcp.add_argument("--host",
                     dest="MCP_HOST",
                     help="Bind host for streamable HTTP transport",
                     action="store",
                     type=str)
    mcp.add_argument("--port",
                     dest="MCP_PORT",
                     help="Bind port for streamable HTTP transport",
                     action="store",
                     type=int)
    _add_common_arguments(mcp)

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
