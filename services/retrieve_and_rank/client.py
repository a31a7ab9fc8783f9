"""
HTTP client for the Retrieve and Rank service.

Covers the Solr cluster lifecycle, Solr configurations and collections
inside a cluster, and read/delete access to rankers. Every method maps to
one REST call.
"""

from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

import httpx

from core.config import Settings, settings as default_settings
from services.base import WatsonService
from services.retrieve_and_rank.base import (
    Ranker,
    RetrieveAndRankClient,
    SolrCluster,
    SolrClusterList,
    SolrClusterStats,
)


def _path(*segments: str) -> str:
    """
    Join URL path segments, percent-encoding each one.

    IDs and names always stay a single segment: "/" and "?" are escaped,
    and "." or ".." are encoded so they are not resolved as dot segments.
    """
    escaped = []
    for segment in segments:
        if segment in (".", ".."):
            escaped.append(segment.replace(".", "%2E"))
        else:
            escaped.append(quote(segment, safe=""))
    return "/" + "/".join(escaped)


class RetrieveAndRank(WatsonService, RetrieveAndRankClient):
    """
    Retrieve and Rank REST client.

    Usage:
        async with RetrieveAndRank.from_settings() as service:
            cluster = await service.create_solr_cluster("docs")
            await service.delete_solr_cluster(cluster.solr_cluster_id)
    """

    service_name = "retrieve_and_rank"

    def __init__(
        self,
        username: str,
        password: str,
        service_url: str = "https://gateway.watsonplatform.net/retrieve-and-rank/api",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            username,
            password,
            service_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "RetrieveAndRank":
        """Build a client from configured credentials."""
        settings = settings or default_settings
        return cls(
            settings.retrieve_and_rank_username or "",
            settings.retrieve_and_rank_password or "",
            service_url=settings.retrieve_and_rank_url,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    # =========================================
    # Solr clusters
    # =========================================

    async def create_solr_cluster(
        self,
        cluster_name: str,
        size: Optional[str] = None,
    ) -> SolrCluster:
        body = {"cluster_name": cluster_name}
        if size is not None:
            body["cluster_size"] = size
        data = await self._request_json("POST", "/v1/solr_clusters", json=body)
        return SolrCluster.model_validate(data)

    async def get_solr_clusters(self) -> list[SolrCluster]:
        data = await self._request_json("GET", "/v1/solr_clusters")
        return SolrClusterList.model_validate(data).clusters

    async def get_solr_cluster(self, solr_cluster_id: str) -> SolrCluster:
        data = await self._request_json("GET", _path("v1", "solr_clusters", solr_cluster_id))
        return SolrCluster.model_validate(data)

    async def delete_solr_cluster(self, solr_cluster_id: str) -> None:
        await self._request("DELETE", _path("v1", "solr_clusters", solr_cluster_id))

    async def get_solr_cluster_stats(self, solr_cluster_id: str) -> SolrClusterStats:
        """Get disk and memory usage of a cluster."""
        data = await self._request_json(
            "GET", _path("v1", "solr_clusters", solr_cluster_id, "stats")
        )
        return SolrClusterStats.model_validate(data)

    # =========================================
    # Solr configurations
    # =========================================

    async def get_solr_configurations(self, solr_cluster_id: str) -> list[str]:
        """List the names of configurations uploaded to a cluster."""
        data = await self._request_json(
            "GET", _path("v1", "solr_clusters", solr_cluster_id, "config")
        )
        return list(data.get("solr_configs", []))

    async def upload_solr_configuration(
        self,
        solr_cluster_id: str,
        config_name: str,
        zip_file: Union[str, Path, bytes],
    ) -> None:
        """
        Upload a zipped Solr configuration directory.

        Args:
            solr_cluster_id: Target cluster
            config_name: Name to store the configuration under
            zip_file: Path to a .zip archive, or its raw bytes
        """
        if isinstance(zip_file, (str, Path)):
            zip_file = Path(zip_file).read_bytes()
        await self._request(
            "POST",
            _path("v1", "solr_clusters", solr_cluster_id, "config", config_name),
            content=zip_file,
            headers={"Content-Type": "application/zip"},
        )

    async def delete_solr_configuration(self, solr_cluster_id: str, config_name: str) -> None:
        await self._request(
            "DELETE", _path("v1", "solr_clusters", solr_cluster_id, "config", config_name)
        )

    # =========================================
    # Solr collections (Solr Collections API passthrough)
    # =========================================

    def _collections_path(self, solr_cluster_id: str) -> str:
        return _path("v1", "solr_clusters", solr_cluster_id, "solr", "admin", "collections")

    async def get_solr_collections(self, solr_cluster_id: str) -> list[str]:
        """List collection names in a cluster."""
        data = await self._request_json(
            "GET",
            self._collections_path(solr_cluster_id),
            params={"action": "LIST", "wt": "json"},
        )
        return list(data.get("collections", []))

    async def create_solr_collection(
        self,
        solr_cluster_id: str,
        name: str,
        config_name: str,
    ) -> None:
        """Create a collection backed by a previously uploaded configuration."""
        await self._request(
            "POST",
            self._collections_path(solr_cluster_id),
            params={
                "action": "CREATE",
                "name": name,
                "collection.configName": config_name,
                "wt": "json",
            },
        )

    async def delete_solr_collection(self, solr_cluster_id: str, name: str) -> None:
        await self._request(
            "POST",
            self._collections_path(solr_cluster_id),
            params={"action": "DELETE", "name": name, "wt": "json"},
        )

    # =========================================
    # Rankers
    # =========================================

    async def get_rankers(self) -> list[Ranker]:
        data = await self._request_json("GET", "/v1/rankers")
        return [Ranker.model_validate(item) for item in data.get("rankers", [])]

    async def get_ranker(self, ranker_id: str) -> Ranker:
        """Get a ranker including its training status."""
        data = await self._request_json("GET", _path("v1", "rankers", ranker_id))
        return Ranker.model_validate(data)

    async def delete_ranker(self, ranker_id: str) -> None:
        await self._request("DELETE", _path("v1", "rankers", ranker_id))
