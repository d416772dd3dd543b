"""Tests for the Redis cache backend against a mocked client."""

import json

import pytest
import redis

from conftest import TEST_TTLS
from learnhub.entities import CacheTier
from learnhub.exceptions import CacheBackendError
from learnhub.protocols import CacheStore
from learnhub.repositories import RedisCacheStore
from learnhub.services import CacheRequest, CacheService
from learnhub.services.cache_keys import course_list_key


@pytest.fixture
def redis_client(mocker):
    return mocker.MagicMock(spec=redis.Redis)


@pytest.fixture
def store(redis_client) -> RedisCacheStore:
    return RedisCacheStore(redis_client=redis_client, key_prefix="learnhub")


class TestRedisCacheStore:

    def test_satisfies_protocol(self, store: RedisCacheStore) -> None:
        assert isinstance(store, CacheStore)

    def test_set_uses_namespaced_key_and_native_ttl(self, store, redis_client) -> None:
        store.set(CacheTier.SHORT, "notes:list", [{"id": "1"}], ttl=60)

        redis_client.set.assert_called_once_with(
            "learnhub:short:notes:list", json.dumps([{"id": "1"}]), ex=60
        )

    def test_get_decodes_json(self, store, redis_client) -> None:
        redis_client.get.return_value = '{"id": "7", "title": "Algebra"}'

        assert store.get(CacheTier.LONG, "course:7") == {"id": "7", "title": "Algebra"}
        redis_client.get.assert_called_once_with("learnhub:long:course:7")

    def test_get_missing(self, store, redis_client) -> None:
        redis_client.get.return_value = None
        assert store.get(CacheTier.MEDIUM, "courses:list") is None

    def test_get_undecodable_value(self, store, redis_client) -> None:
        redis_client.get.return_value = "not json"
        with pytest.raises(CacheBackendError, match="Undecodable"):
            store.get(CacheTier.SHORT, "k")

    def test_set_unserializable_value(self, store, redis_client) -> None:
        with pytest.raises(CacheBackendError, match="not JSON serializable"):
            store.set(CacheTier.SHORT, "k", object(), ttl=60)
        redis_client.set.assert_not_called()

    def test_connection_error_becomes_backend_error(self, store, redis_client) -> None:
        redis_client.get.side_effect = redis.ConnectionError("Connection refused")
        with pytest.raises(CacheBackendError, match="Redis GET failed"):
            store.get(CacheTier.SHORT, "k")

    def test_flush_deletes_tier_keys(self, store, redis_client) -> None:
        redis_client.scan_iter.return_value = iter(["learnhub:long:a", "learnhub:long:b"])
        redis_client.delete.return_value = 2

        assert store.flush(CacheTier.LONG) == 2
        redis_client.scan_iter.assert_called_once_with(match="learnhub:long:*")
        redis_client.delete.assert_called_once_with("learnhub:long:a", "learnhub:long:b")

    def test_flush_empty_tier(self, store, redis_client) -> None:
        redis_client.scan_iter.return_value = iter([])

        assert store.flush(CacheTier.SHORT) == 0
        redis_client.delete.assert_not_called()

    def test_count(self, store, redis_client) -> None:
        redis_client.scan_iter.return_value = iter(["learnhub:medium:x", "learnhub:medium:y"])
        assert store.count(CacheTier.MEDIUM) == 2

    def test_health_check(self, store, redis_client) -> None:
        redis_client.ping.return_value = True
        assert store.health_check() is True

        redis_client.ping.side_effect = redis.ConnectionError("down")
        assert store.health_check() is False


class TestCacheServiceOverBrokenRedis:

    @pytest.mark.asyncio
    async def test_requests_succeed_while_redis_is_down(self, store, redis_client) -> None:
        error = redis.ConnectionError("Connection refused")
        redis_client.get.side_effect = error
        redis_client.set.side_effect = error
        redis_client.scan_iter.side_effect = error
        redis_client.ping.side_effect = error

        cache = CacheService(store=store, ttls=dict(TEST_TTLS))
        cached = cache.wrap(CacheTier.MEDIUM, course_list_key)

        assert await cached(CacheRequest.get(), lambda: ["course"]) == ["course"]
        assert cache.flush("all") == 0
        assert cache.stats()["medium"]["keys"] == 0
        assert cache.is_healthy() is False
