"""
Solr cluster management script.

Lists, creates, inspects and deletes Solr clusters using the
credentials from the environment or .env file.

Usage:
    python -m scripts.solr_clusters list
    python -m scripts.solr_clusters create my-cluster --size 1
    python -m scripts.solr_clusters stats sc1234abcd_...
    python -m scripts.solr_clusters delete sc1234abcd_...
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.config import settings
from core.logging import configure_logging, get_logger
from services.base import ServiceError
from services.retrieve_and_rank import RetrieveAndRank


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Retrieve and Rank Solr clusters")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List all Solr clusters")

    create = commands.add_parser("create", help="Create a Solr cluster")
    create.add_argument("name")
    create.add_argument("--size", default=None, help="Cluster units; omit for a free cluster")

    stats = commands.add_parser("stats", help="Show disk and memory usage")
    stats.add_argument("solr_cluster_id")

    delete = commands.add_parser("delete", help="Delete a Solr cluster")
    delete.add_argument("solr_cluster_id")

    return parser


async def run(args: argparse.Namespace) -> object:
    """Execute one command and return a JSON-serializable result."""
    async with RetrieveAndRank.from_settings(settings) as service:
        if args.command == "list":
            clusters = await service.get_solr_clusters()
            return [cluster.model_dump(mode="json") for cluster in clusters]
        if args.command == "create":
            cluster = await service.create_solr_cluster(args.name, size=args.size)
            return cluster.model_dump(mode="json")
        if args.command == "stats":
            stats = await service.get_solr_cluster_stats(args.solr_cluster_id)
            return stats.model_dump(mode="json")
        if args.command == "delete":
            await service.delete_solr_cluster(args.solr_cluster_id)
            return {"deleted": args.solr_cluster_id}
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    if not settings.has_retrieve_and_rank_credentials:
        print(
            "Set RETRIEVE_AND_RANK_USERNAME and RETRIEVE_AND_RANK_PASSWORD first",
            file=sys.stderr,
        )
        return 2

    try:
        result = asyncio.run(run(args))
    except ServiceError as e:
        logger.error("Command failed", command=args.command, code=e.code, error=e.message)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
