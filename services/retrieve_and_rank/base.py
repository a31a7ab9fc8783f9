"""
Abstract base class and wire models for Retrieve and Rank clients.

This defines the contract that cluster lifecycle implementations must
follow, whether they talk to the live service or keep state in memory.

Design principles:
- Async-first: All operations are coroutines
- Result objects: Return pydantic models, not raw dicts
- Snapshots only: Models mirror remote state and are never mutated locally
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SolrClusterStatus(str, Enum):
    """Provisioning status reported by the service."""
    READY = "READY"
    NOT_AVAILABLE = "NOT_AVAILABLE"


class SolrCluster(BaseModel):
    """
    A Solr cluster owned by this service instance.

    Returned by create, get and list operations.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    solr_cluster_id: str
    cluster_name: str
    cluster_size: str = Field(
        ...,
        description="Number of units; empty string for a free cluster",
    )
    solr_cluster_status: SolrClusterStatus

    @property
    def is_ready(self) -> bool:
        return self.solr_cluster_status == SolrClusterStatus.READY


class SolrClusterList(BaseModel):
    """Response body of the list endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    clusters: list[SolrCluster] = Field(default_factory=list)


class MemoryUsage(BaseModel):
    """Disk or memory consumption of a cluster."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    used_bytes: int
    total_bytes: int
    used: str
    total: str
    percent_used: float


class SolrClusterStats(BaseModel):
    """Resource usage of a Solr cluster."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    solr_cluster_id: str
    disk_usage: MemoryUsage
    memory_usage: MemoryUsage


class RankerStatus(str, Enum):
    """Training status of a ranker."""
    NON_EXISTENT = "Non Existent"
    TRAINING = "Training"
    FAILED = "Failed"
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"


class Ranker(BaseModel):
    """
    A trained ranker.

    The list endpoint omits status fields; the detail endpoint fills them.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    ranker_id: str
    name: str
    url: str
    created: str
    status: Optional[RankerStatus] = None
    status_description: Optional[str] = None


class RetrieveAndRankClient(ABC):
    """
    Abstract interface for Solr cluster lifecycle clients.

    Usage:
        client = RetrieveAndRank(username, password)

        cluster = await client.create_solr_cluster("docs", size="1")
        clusters = await client.get_solr_clusters()
        await client.delete_solr_cluster(cluster.solr_cluster_id)

    Failures surface as ServiceError with the remote HTTP status code.
    """

    @abstractmethod
    async def create_solr_cluster(
        self,
        cluster_name: str,
        size: Optional[str] = None,
    ) -> SolrCluster:
        """
        Provision a new Solr cluster.

        Args:
            cluster_name: Human-readable name of the cluster
            size: Number of units as a string; None for a free cluster

        Returns:
            The newly created cluster, usually NOT_AVAILABLE at first

        Raises:
            ServiceError: 400 if the size is invalid
        """
        pass

    @abstractmethod
    async def get_solr_clusters(self) -> list[SolrCluster]:
        """List every Solr cluster associated with this service instance."""
        pass

    @abstractmethod
    async def get_solr_cluster(self, solr_cluster_id: str) -> SolrCluster:
        """
        Get the current snapshot of one cluster.

        Raises:
            ServiceError: 400 for a malformed ID
        """
        pass

    @abstractmethod
    async def delete_solr_cluster(self, solr_cluster_id: str) -> None:
        """
        Delete a Solr cluster.

        Raises:
            ServiceError: 400 for a malformed ID
        """
        pass
