"""MCP server exposing the recipe scraper as a tool."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .config import ScrapeConfig
from .scraper import scrape_recipe

logger = logging.getLogger("foodscraper.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="foodscraper")


@mcp.tool()
async def scrape(
    url: str,
) -> str:
    """Scrape a recipe from a supported website and return it as JSON."""

    config = ScrapeConfig(output_root=Path.cwd())
    recipe = await asyncio.to_thread(scrape_recipe, url, config)
    return json.dumps(recipe.to_dict(), indent=2, ensure_ascii=False)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
