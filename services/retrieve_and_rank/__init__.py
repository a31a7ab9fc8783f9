"""
Retrieve and Rank service clients.

Exports the abstract interface, wire models and implementations.
"""

from services.retrieve_and_rank.base import (
    MemoryUsage,
    Ranker,
    RankerStatus,
    RetrieveAndRankClient,
    SolrCluster,
    SolrClusterStats,
    SolrClusterStatus,
)
from services.retrieve_and_rank.client import RetrieveAndRank
from services.retrieve_and_rank.mock_client import MockRetrieveAndRank

__all__ = [
    "MemoryUsage",
    "MockRetrieveAndRank",
    "Ranker",
    "RankerStatus",
    "RetrieveAndRank",
    "RetrieveAndRankClient",
    "SolrCluster",
    "SolrClusterStats",
    "SolrClusterStatus",
]
