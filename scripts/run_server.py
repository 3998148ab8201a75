#!/usr/bin/env python3
"""
Run the mock storefront API with uvicorn.

Usage (from repo root):
  python scripts/run_server.py --port 3001
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import uvicorn

from yapee.api.main import app, app_config
from yapee.utils.config_loader import resolve_port


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Yapee storefront API")
    parser.add_argument("--host", default=app_config.server.host, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Port (defaults to PORT or config)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    port = args.port or resolve_port(app_config)
    if args.reload:
        uvicorn.run("yapee.api.main:app", host=args.host, port=port, reload=True)
    else:
        uvicorn.run(app, host=args.host, port=port)


if __name__ == "__main__":
    main()
