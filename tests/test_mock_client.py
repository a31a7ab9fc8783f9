"""
Tests for MockRetrieveAndRank.

Verifies that the mock client follows the same lifecycle and error
codes as the live Retrieve and Rank service.
"""

import asyncio

import pytest

from services.base import ServiceError
from services.retrieve_and_rank.base import SolrClusterStatus
from services.retrieve_and_rank.mock_client import (
    CLUSTER_ID_PATTERN,
    MockRetrieveAndRank,
)


@pytest.fixture
def mock_client():
    """Create a mock client whose clusters stay NOT_AVAILABLE for a minute."""
    return MockRetrieveAndRank(provisioning_seconds=60)


@pytest.mark.asyncio
async def test_list_clusters_initially_empty(mock_client):
    """Test listing clusters before any are created."""
    clusters = await mock_client.get_solr_clusters()
    assert clusters == []


@pytest.mark.asyncio
async def test_create_cluster(mock_client):
    """Test that a created cluster echoes its name and has every field set."""
    cluster = await mock_client.create_solr_cluster("python-sdk-test-cluster")

    assert cluster.cluster_name == "python-sdk-test-cluster"
    assert cluster.solr_cluster_id is not None
    assert cluster.cluster_size is not None
    assert cluster.solr_cluster_status is not None
    assert CLUSTER_ID_PATTERN.match(cluster.solr_cluster_id)


@pytest.mark.asyncio
async def test_create_free_cluster_has_empty_size(mock_client):
    cluster = await mock_client.create_solr_cluster("free")
    assert cluster.cluster_size == ""


@pytest.mark.asyncio
async def test_create_and_delete_cluster(mock_client):
    """Test full lifecycle: create -> list -> delete -> list."""
    cluster = await mock_client.create_solr_cluster("lifecycle", size="2")

    clusters = await mock_client.get_solr_clusters()
    assert [c.solr_cluster_id for c in clusters] == [cluster.solr_cluster_id]

    await mock_client.delete_solr_cluster(cluster.solr_cluster_id)

    assert await mock_client.get_solr_clusters() == []


@pytest.mark.asyncio
async def test_create_cluster_with_invalid_size(mock_client):
    """Test that an out-of-range size is rejected with 400."""
    with pytest.raises(ServiceError) as exc_info:
        await mock_client.create_solr_cluster("python-sdk-test-cluster", size="100")

    assert exc_info.value.code == 400
    assert await mock_client.get_solr_clusters() == []


@pytest.mark.asyncio
async def test_delete_cluster_with_bad_id(mock_client):
    """Test that a malformed cluster ID is rejected with 400."""
    with pytest.raises(ServiceError) as exc_info:
        await mock_client.delete_solr_cluster("abcde-12345-fghij-67890")

    assert exc_info.value.code == 400


@pytest.mark.asyncio
async def test_delete_unknown_cluster(mock_client):
    """Test that a well-formed but unknown ID is rejected with 404."""
    with pytest.raises(ServiceError) as exc_info:
        await mock_client.delete_solr_cluster(
            "sc19cac12e_3587_4510_820d_87945c51a3f9"
        )

    assert exc_info.value.code == 404


@pytest.mark.asyncio
async def test_get_cluster_with_bad_id(mock_client):
    """Test that looking up a malformed cluster ID is rejected with 400."""
    with pytest.raises(ServiceError) as exc_info:
        await mock_client.get_solr_cluster("abcde-12345-fghij-67890")

    assert exc_info.value.code == 400


@pytest.mark.asyncio
async def test_get_unknown_cluster(mock_client):
    """Test that looking up a well-formed but unknown ID is rejected with 404."""
    with pytest.raises(ServiceError) as exc_info:
        await mock_client.get_solr_cluster("sc19cac12e_3587_4510_820d_87945c51a3f9")

    assert exc_info.value.code == 404


@pytest.mark.asyncio
async def test_cluster_provisioning(mock_client):
    """Test that new clusters are NOT_AVAILABLE until provisioned."""
    cluster = await mock_client.create_solr_cluster("provisioning", size="1")
    assert cluster.solr_cluster_status == SolrClusterStatus.NOT_AVAILABLE
    assert not cluster.is_ready

    await mock_client.force_cluster_ready(cluster.solr_cluster_id)

    current = await mock_client.get_solr_cluster(cluster.solr_cluster_id)
    assert current.is_ready
    # Earlier snapshot is unchanged
    assert cluster.solr_cluster_status == SolrClusterStatus.NOT_AVAILABLE


@pytest.mark.asyncio
async def test_cluster_becomes_ready_over_time():
    """Test the time-based NOT_AVAILABLE -> READY transition."""
    client = MockRetrieveAndRank(provisioning_seconds=1)
    cluster = await client.create_solr_cluster("timed")

    await asyncio.sleep(1.2)

    current = await client.get_solr_cluster(cluster.solr_cluster_id)
    assert current.solr_cluster_status == SolrClusterStatus.READY


@pytest.mark.asyncio
async def test_clear_all_clusters(mock_client):
    await mock_client.create_solr_cluster("a")
    await mock_client.create_solr_cluster("b")

    await mock_client.clear_all_clusters()

    assert await mock_client.get_solr_clusters() == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
