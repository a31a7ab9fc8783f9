"""
Integration tests against a live Retrieve and Rank service instance.

Skipped unless RETRIEVE_AND_RANK_USERNAME and RETRIEVE_AND_RANK_PASSWORD
are configured. The listing test assumes a fresh instance with no clusters.
"""

import pytest
import pytest_asyncio

from core.config import get_settings
from services.base import ServiceError
from services.retrieve_and_rank.client import RetrieveAndRank


CLUSTER_NAME = "python-sdk-unit-test-solr-cluster"

pytestmark = pytest.mark.skipif(
    not get_settings().has_retrieve_and_rank_credentials,
    reason="Retrieve and Rank credentials not configured",
)


@pytest_asyncio.fixture
async def service():
    """Live client, closed after each test."""
    client = RetrieveAndRank.from_settings(get_settings())
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_get_solr_clusters(service):
    """Test listing the clusters of a fresh service instance."""
    clusters = await service.get_solr_clusters()
    assert len(clusters) == 0


@pytest.mark.asyncio
async def test_create_and_delete_solr_cluster(service):
    """Test creating a cluster and deleting it again."""
    cluster = await service.create_solr_cluster(CLUSTER_NAME)

    try:
        assert cluster.cluster_name == CLUSTER_NAME
        assert cluster.solr_cluster_id is not None
        assert cluster.cluster_size is not None
        assert cluster.solr_cluster_status is not None
    finally:
        await service.delete_solr_cluster(cluster.solr_cluster_id)


@pytest.mark.asyncio
async def test_create_solr_cluster_with_invalid_size(service):
    with pytest.raises(ServiceError) as exc_info:
        await service.create_solr_cluster(CLUSTER_NAME, size="100")
    assert exc_info.value.code == 400


@pytest.mark.asyncio
async def test_delete_solr_cluster_with_bad_id(service):
    with pytest.raises(ServiceError) as exc_info:
        await service.delete_solr_cluster("abcde-12345-fghij-67890")
    assert exc_info.value.code == 400
