"""
Mock Retrieve and Rank client for offline testing.

Simulates the Solr cluster lifecycle without a live service.
Clusters start NOT_AVAILABLE and report READY once a provisioning
delay has elapsed, mirroring how the remote service behaves.

Key features:
- Same validation errors as the service (400 for bad size or ID)
- Configurable provisioning delay
- Helpers to force state for tests
"""

import asyncio
import re
import uuid
from datetime import datetime, timezone
from typing import Optional

from core.config import settings
from core.logging import get_logger
from services.base import ServiceError
from services.retrieve_and_rank.base import (
    RetrieveAndRankClient,
    SolrCluster,
    SolrClusterStatus,
)


logger = get_logger(__name__, service="retrieve_and_rank_mock")

CLUSTER_ID_PATTERN = re.compile(
    r"^sc[0-9a-f]{8}_[0-9a-f]{4}_[0-9a-f]{4}_[0-9a-f]{4}_[0-9a-f]{12}$"
)
VALID_SIZES = {str(n) for n in range(1, 8)}


class MockCluster:
    """Internal representation of a mock Solr cluster."""

    def __init__(
        self,
        solr_cluster_id: str,
        cluster_name: str,
        cluster_size: str,
        provisioning_seconds: int,
    ):
        self.solr_cluster_id = solr_cluster_id
        self.cluster_name = cluster_name
        self.cluster_size = cluster_size
        self.provisioning_seconds = provisioning_seconds
        self.created_at = datetime.now(timezone.utc)
        self._ready = False

    @property
    def status(self) -> SolrClusterStatus:
        """Calculate current status based on elapsed time."""
        if not self._ready:
            elapsed = (datetime.now(timezone.utc) - self.created_at).total_seconds()
            if elapsed >= self.provisioning_seconds:
                self._ready = True
        return SolrClusterStatus.READY if self._ready else SolrClusterStatus.NOT_AVAILABLE

    def force_ready(self) -> None:
        self._ready = True

    def snapshot(self) -> SolrCluster:
        return SolrCluster(
            solr_cluster_id=self.solr_cluster_id,
            cluster_name=self.cluster_name,
            cluster_size=self.cluster_size,
            solr_cluster_status=self.status,
        )


def _new_cluster_id() -> str:
    """Generate an ID shaped like the service's: sc + underscored UUID."""
    return "sc" + str(uuid.uuid4()).replace("-", "_")


class MockRetrieveAndRank(RetrieveAndRankClient):
    """
    In-memory implementation of RetrieveAndRankClient.

    Usage:
        client = MockRetrieveAndRank(provisioning_seconds=0)

        cluster = await client.create_solr_cluster("docs", size="1")
        assert (await client.get_solr_cluster(cluster.solr_cluster_id)).is_ready
    """

    def __init__(self, provisioning_seconds: Optional[int] = None):
        """
        Initialize mock client.

        Args:
            provisioning_seconds: Seconds before a new cluster is READY.
                Defaults to config value.
        """
        self._clusters: dict[str, MockCluster] = {}
        if provisioning_seconds is None:
            provisioning_seconds = settings.mock_provisioning_seconds
        self._provisioning_seconds = provisioning_seconds
        self._lock = asyncio.Lock()

    async def create_solr_cluster(
        self,
        cluster_name: str,
        size: Optional[str] = None,
    ) -> SolrCluster:
        if size is not None and size not in VALID_SIZES:
            raise ServiceError(400, f"Invalid cluster size: {size}")

        async with self._lock:
            cluster = MockCluster(
                solr_cluster_id=_new_cluster_id(),
                cluster_name=cluster_name,
                cluster_size=size or "",
                provisioning_seconds=self._provisioning_seconds,
            )
            self._clusters[cluster.solr_cluster_id] = cluster

        logger.info(
            "Mock cluster created",
            solr_cluster_id=cluster.solr_cluster_id,
            cluster_size=cluster.cluster_size,
        )
        return cluster.snapshot()

    async def get_solr_clusters(self) -> list[SolrCluster]:
        async with self._lock:
            return [cluster.snapshot() for cluster in self._clusters.values()]

    async def get_solr_cluster(self, solr_cluster_id: str) -> SolrCluster:
        async with self._lock:
            return self._lookup(solr_cluster_id).snapshot()

    async def delete_solr_cluster(self, solr_cluster_id: str) -> None:
        async with self._lock:
            self._lookup(solr_cluster_id)
            del self._clusters[solr_cluster_id]
        logger.info("Mock cluster deleted", solr_cluster_id=solr_cluster_id)

    def _lookup(self, solr_cluster_id: str) -> MockCluster:
        """Find a cluster, raising the service's error codes on failure."""
        if not CLUSTER_ID_PATTERN.match(solr_cluster_id):
            raise ServiceError(400, f"Invalid Solr cluster ID: {solr_cluster_id}")
        cluster = self._clusters.get(solr_cluster_id)
        if cluster is None:
            raise ServiceError(404, f"Solr cluster {solr_cluster_id} not found")
        return cluster

    # =========================================
    # Testing utilities
    # =========================================

    async def force_cluster_ready(self, solr_cluster_id: str) -> None:
        """Skip the provisioning delay for one cluster."""
        async with self._lock:
            cluster = self._clusters.get(solr_cluster_id)
            if cluster:
                cluster.force_ready()

    async def clear_all_clusters(self) -> None:
        """Clear all clusters (for testing)."""
        async with self._lock:
            self._clusters.clear()
