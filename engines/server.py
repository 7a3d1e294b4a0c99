"""
Stunt Ledger Calculation Engines - MCP Server

FastMCP server exposing the Exhibit G tools:
- Rate Engine: SAG-AFTRA stunt performer daily pay breakdown
- Payment Tracker: payment due dates
- Test Bench: seeded scenarios with known totals
"""

import logging

from backend.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Importing the tool module registers all the tools with the MCP server
from engines.tools.rate_engine import mcp  # noqa: E402


def main():
    """Run the MCP server."""
    logger.info("Starting Stunt Ledger Calculation Engines MCP Server")
    mcp.run()


if __name__ == "__main__":
    main()
