"""Command-line entry point for the agent chat backend.

Usage examples:
    # Normalized web search (summary + sources)
    python -m src.main search "python asyncio"

    # Direct answer only
    python -m src.main answer "2+2"

    # Seeded agents
    python -m src.main agents
"""

import argparse
import asyncio
import json
import logging

from src.app import Services, create_services
from src.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level),
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Agent chat backend utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Run a web search and print summary and sources")
    search.add_argument("query", help="Search text")

    answer = sub.add_parser("answer", help="Print the instant answer for a query")
    answer.add_argument("query", help="Search text")

    sub.add_parser("agents", help="List the active agents")
    return parser


async def run(args: argparse.Namespace, services: Services) -> dict | list:
    """Execute one CLI command and return its JSON-serializable output."""
    if args.command == "search":
        result = await services.search.search(args.query)
        return result.to_dict()
    if args.command == "answer":
        answer = await services.search.get_instant_answer(args.query)
        return answer.to_dict()

    agents = await services.storage.list_active_agents()
    return [agent.model_dump(mode="json", by_alias=True) for agent in agents]


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    services = create_services()
    logger.debug("Running command: %s", args.command)

    output = asyncio.run(run(args, services))
    print(json.dumps(output, indent=2))

    if isinstance(output, dict) and not output.get("success", True):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
