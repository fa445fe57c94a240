#!/usr/bin/env python3
"""
Magazine Search MCP Server - HTTP Mode

Runs the MCP server over streamable HTTP so remote clients (e.g. ChatGPT)
can connect.

Usage:
    # Defaults: 0.0.0.0:8001, endpoint /mcp
    python run_server.py

    # Custom corpus and port
    python run_server.py --data ./blogposts.en.json --port 9000

Environment Variables:
    BLOG_DATA_PATH: Corpus JSON file
    UI_ASSETS_DIR: Built widget assets (default: ui-sdk/dist)
    WIDGET_PREBUILT_DIR: Prebuilt widget documents (default: UI_ASSETS_DIR)
    PORT: Server port (default: 8001)
    MCP_HOST: Server host (default: 0.0.0.0)
    MCP_PATH: MCP endpoint path (default: /mcp)
    MAX_LISTED_ARTICLE_RESOURCES: Listed article resources (default: 50)
    ALLOWED_ORIGIN: Comma-separated CORS allow-list (production)
    APP_ENV: "production" enables the strict CORS policy
    DEPLOYMENT_ENV: "local" or "managed"
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from magazine_search.core.exceptions import CorpusLoadError
from magazine_search.infrastructure import Settings
from magazine_search.presentation.http import ApplicationState, serve

logger = logging.getLogger(__name__)


def main():
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="Run Magazine Search MCP Server in HTTP mode"
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=settings.blog_data_path,
        help="Corpus JSON file (default: BLOG_DATA_PATH or blogposts.en.json)",
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=settings.ui_assets_dir,
        help="Built widget assets directory (default: UI_ASSETS_DIR or ui-sdk/dist)",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Server host (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Server port (default: {settings.port})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    prebuilt_dir = settings.widget_prebuilt_dir
    if prebuilt_dir == settings.ui_assets_dir:
        prebuilt_dir = args.assets

    settings = dataclasses.replace(
        settings,
        blog_data_path=args.data,
        ui_assets_dir=args.assets,
        widget_prebuilt_dir=prebuilt_dir,
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper(),
    )

    logger.info("Creating Magazine Search MCP Server...")
    logger.info(f"  Corpus: {settings.blog_data_path}")
    logger.info(f"  Widget assets: {settings.ui_assets_dir}")
    logger.info(f"  Deployment: {settings.deployment.value}")

    state = ApplicationState(settings)
    try:
        state.initialize()
    except CorpusLoadError as e:
        logger.critical(f"{e}")
        sys.exit(1)

    serve(state)


if __name__ == "__main__":
    main()
