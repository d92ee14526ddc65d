"""CLI entry point: python -m neontycoon.mcp [catalog_module]"""

from __future__ import annotations

import logging
import sys


def main() -> None:
    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    module_path = sys.argv[1] if len(sys.argv) > 1 else None

    # Redirect stdout to stderr during module loading in case define_catalog() prints
    real_stdout = sys.stdout
    sys.stdout = sys.stderr
    try:
        from neontycoon.cli import load_catalog

        catalog = load_catalog(module_path)
    finally:
        sys.stdout = real_stdout

    from neontycoon.mcp.server import create_server

    server = create_server(catalog)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
