"""Tests for the tiered cache service."""

from dataclasses import dataclass

import pytest

from conftest import TEST_TTLS, FakeClock
from learnhub.entities import CacheTier
from learnhub.exceptions import CacheBackendError
from learnhub.services import CacheRequest, CacheService
from learnhub.services.cache_keys import (
    INVALIDATION,
    ROUTE_TIERS,
    course_by_id_key,
    course_list_key,
    notes_by_course_key,
    summary_latest_key,
)


@dataclass
class FakeResponse:
    status_code: int
    body: str


class BrokenStore:
    """CacheStore whose every operation fails."""

    def get(self, tier, key):
        raise CacheBackendError("connection refused")

    def set(self, tier, key, value, ttl):
        raise CacheBackendError("connection refused")

    def flush(self, tier):
        raise CacheBackendError("connection refused")

    def count(self, tier):
        raise CacheBackendError("connection refused")

    def health_check(self):
        return False


class TestLookupAndStore:
    """Tests for lookup/store and TTL expiry."""

    def test_lookup_missing_key(self, cache_service: CacheService) -> None:
        assert cache_service.lookup(CacheTier.SHORT, "nope") is None

    def test_store_then_lookup(self, cache_service: CacheService) -> None:
        cache_service.store(CacheTier.MEDIUM, "courses:list", [{"id": "1"}])
        assert cache_service.lookup(CacheTier.MEDIUM, "courses:list") == [{"id": "1"}]

    @pytest.mark.parametrize("tier", list(CacheTier))
    def test_entry_expires_after_tier_ttl(
        self, cache_service: CacheService, clock: FakeClock, tier: CacheTier
    ) -> None:
        """Value is served until the tier TTL elapses, then absent."""
        cache_service.store(tier, "k", "v")

        clock.advance(TEST_TTLS[tier] - 0.5)
        assert cache_service.lookup(tier, "k") == "v"

        clock.advance(0.5)
        assert cache_service.lookup(tier, "k") is None

    def test_store_overwrites_and_resets_expiry(
        self, cache_service: CacheService, clock: FakeClock
    ) -> None:
        cache_service.store(CacheTier.SHORT, "k", "old")
        clock.advance(50)
        cache_service.store(CacheTier.SHORT, "k", "new")
        clock.advance(50)

        assert cache_service.lookup(CacheTier.SHORT, "k") == "new"

    def test_tiers_are_independent_namespaces(self, cache_service: CacheService) -> None:
        cache_service.store(CacheTier.SHORT, "shared", "short value")
        cache_service.store(CacheTier.LONG, "shared", "long value")

        cache_service.flush(CacheTier.SHORT)

        assert cache_service.lookup(CacheTier.SHORT, "shared") is None
        assert cache_service.lookup(CacheTier.LONG, "shared") == "long value"

    def test_missing_ttl_rejected(self, memory_store) -> None:
        with pytest.raises(ValueError, match="Missing TTL"):
            CacheService(store=memory_store, ttls={CacheTier.SHORT: 60})

    @pytest.mark.parametrize("bad_ttl", [0, -5])
    def test_non_positive_ttl_rejected(self, memory_store, bad_ttl: int) -> None:
        ttls = dict(TEST_TTLS)
        ttls[CacheTier.MEDIUM] = bad_ttl
        with pytest.raises(ValueError, match="TTL for tier medium must be positive"):
            CacheService(store=memory_store, ttls=ttls)

    def test_stored_value_isolated_from_caller(self, cache_service: CacheService) -> None:
        payload = [{"id": "1", "title": "Bio"}]
        cache_service.store(CacheTier.MEDIUM, "courses:list", payload)
        payload[0]["title"] = "changed after store"

        returned = cache_service.lookup(CacheTier.MEDIUM, "courses:list")
        returned.append({"id": "x"})

        assert cache_service.lookup(CacheTier.MEDIUM, "courses:list") == [{"id": "1", "title": "Bio"}]

    @pytest.mark.asyncio
    async def test_mutating_a_hit_does_not_change_later_hits(self, cache_service: CacheService) -> None:
        cached = cache_service.wrap(CacheTier.MEDIUM, course_list_key)

        first = await cached(CacheRequest.get(), lambda: [{"id": "1", "title": "Bio"}])
        first.append({"id": "x"})
        first[0]["title"] = "MUTATED"

        second = await cached(CacheRequest.get(), lambda: [])
        second[0]["title"] = "MUTATED AGAIN"

        again = await cached(CacheRequest.get(), lambda: [])
        assert again == [{"id": "1", "title": "Bio"}]


class TestWrap:
    """Tests for the read-through interceptor."""

    @pytest.mark.asyncio
    async def test_hit_skips_compute(self, cache_service: CacheService) -> None:
        calls = []

        def compute():
            calls.append(1)
            return {"id": "7", "title": "Algebra"}

        cached = cache_service.wrap(CacheTier.LONG, course_by_id_key)
        first = await cached(CacheRequest.get(id="7"), compute)
        second = await cached(CacheRequest.get(id="7"), compute)

        assert first == second == {"id": "7", "title": "Algebra"}
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_async_compute(self, cache_service: CacheService) -> None:
        async def compute():
            return ["note"]

        cached = cache_service.wrap(CacheTier.SHORT, notes_by_course_key)
        assert await cached(CacheRequest.get(course_id="c1"), compute) == ["note"]
        assert cache_service.lookup(CacheTier.SHORT, "notes:course:c1") == ["note"]

    @pytest.mark.asyncio
    async def test_distinct_keys_do_not_collide(self, cache_service: CacheService) -> None:
        cached = cache_service.wrap(CacheTier.LONG, course_by_id_key)
        await cached(CacheRequest.get(id="1"), lambda: {"id": "1"})
        result = await cached(CacheRequest.get(id="2"), lambda: {"id": "2"})
        assert result == {"id": "2"}

    @pytest.mark.asyncio
    async def test_error_propagates_and_is_not_cached(self, cache_service: CacheService) -> None:
        def failing():
            raise LookupError("course not found")

        cached = cache_service.wrap(CacheTier.LONG, course_by_id_key)
        with pytest.raises(LookupError, match="course not found"):
            await cached(CacheRequest.get(id="9"), failing)

        assert cache_service.lookup(CacheTier.LONG, "course:9") is None

    @pytest.mark.asyncio
    async def test_only_successful_outcomes_populate_cache(self, cache_service: CacheService) -> None:
        """A computation alternating error/success only caches the success."""
        outcomes = iter([RuntimeError("db down"), "fresh", RuntimeError("db down again")])

        def compute():
            outcome = next(outcomes)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        cached = cache_service.wrap(CacheTier.MEDIUM, course_list_key)

        with pytest.raises(RuntimeError):
            await cached(CacheRequest.get(), compute)
        assert await cached(CacheRequest.get(), compute) == "fresh"
        # Third call is served from cache, the failing outcome is never reached
        assert await cached(CacheRequest.get(), compute) == "fresh"

    @pytest.mark.asyncio
    async def test_non_ok_status_not_cached(self, cache_service: CacheService) -> None:
        responses = iter([FakeResponse(404, "missing"), FakeResponse(200, "ok")])
        cached = cache_service.wrap(CacheTier.LONG, summary_latest_key)

        first = await cached(CacheRequest.get(id="n1"), lambda: next(responses))
        second = await cached(CacheRequest.get(id="n1"), lambda: next(responses))

        assert first.status_code == 404
        assert second.status_code == 200
        assert cache_service.lookup(CacheTier.LONG, "summary:latest:n1") == FakeResponse(200, "ok")

    @pytest.mark.asyncio
    async def test_none_not_cached(self, cache_service: CacheService) -> None:
        cached = cache_service.wrap(CacheTier.SHORT, course_list_key)
        assert await cached(CacheRequest.get(), lambda: None) is None
        assert cache_service.stats()["short"]["keys"] == 0

    @pytest.mark.asyncio
    async def test_empty_list_is_cached(self, cache_service: CacheService) -> None:
        calls = []

        def compute():
            calls.append(1)
            return []

        cached = cache_service.wrap(CacheTier.MEDIUM, course_list_key)
        await cached(CacheRequest.get(), compute)
        await cached(CacheRequest.get(), compute)
        assert len(calls) == 1


class TestFlushAndStats:
    """Tests for flush and statistics."""

    def test_flush_all(self, cache_service: CacheService) -> None:
        for tier in CacheTier:
            cache_service.store(tier, "a", 1)
            cache_service.store(tier, "b", 2)

        assert cache_service.flush("all") == 6
        for tier in CacheTier:
            assert cache_service.lookup(tier, "a") is None
            assert cache_service.lookup(tier, "b") is None

    def test_flush_by_tier_name(self, cache_service: CacheService) -> None:
        cache_service.store(CacheTier.SHORT, "a", 1)
        cache_service.store(CacheTier.MEDIUM, "a", 1)

        assert cache_service.flush("short") == 1
        assert cache_service.lookup(CacheTier.MEDIUM, "a") == 1

    def test_flush_unknown_tier(self, cache_service: CacheService) -> None:
        with pytest.raises(ValueError, match="Unknown cache tier"):
            cache_service.flush("forever")

    def test_note_invalidation_keeps_course_entries(self, cache_service: CacheService) -> None:
        cache_service.store(CacheTier.SHORT, "notes:list", [])
        cache_service.store(CacheTier.LONG, "course:1", {"id": "1"})

        cache_service.flush_tiers(INVALIDATION["note"])

        assert cache_service.lookup(CacheTier.SHORT, "notes:list") is None
        assert cache_service.lookup(CacheTier.LONG, "course:1") == {"id": "1"}

    def test_course_invalidation_clears_everything(self, cache_service: CacheService) -> None:
        for tier in CacheTier:
            cache_service.store(tier, "k", "v")
        cache_service.flush_tiers(INVALIDATION["course"])
        assert all(cache_service.stats()[tier.value]["keys"] == 0 for tier in CacheTier)

    def test_stats_counts_hits_misses_and_keys(
        self, cache_service: CacheService, clock: FakeClock
    ) -> None:
        cache_service.store(CacheTier.SHORT, "a", 1)
        cache_service.store(CacheTier.SHORT, "b", 2)
        cache_service.lookup(CacheTier.SHORT, "a")
        cache_service.lookup(CacheTier.SHORT, "a")
        cache_service.lookup(CacheTier.SHORT, "zzz")

        stats = cache_service.stats()
        assert stats["short"] == {"hits": 2, "misses": 1, "keys": 2, "hit_rate": pytest.approx(2 / 3)}
        assert stats["medium"] == {"hits": 0, "misses": 0, "keys": 0, "hit_rate": 0.0}

        clock.advance(60)
        assert cache_service.stats()["short"]["keys"] == 0


class TestFailOpen:
    """A broken backend never fails the request."""

    @pytest.fixture
    def broken_cache(self) -> CacheService:
        return CacheService(store=BrokenStore(), ttls=dict(TEST_TTLS))

    @pytest.mark.asyncio
    async def test_wrap_falls_through_to_compute(self, broken_cache: CacheService) -> None:
        calls = []

        def compute():
            calls.append(1)
            return {"courses": []}

        cached = broken_cache.wrap(CacheTier.MEDIUM, course_list_key)
        assert await cached(CacheRequest.get(), compute) == {"courses": []}
        assert await cached(CacheRequest.get(), compute) == {"courses": []}
        assert len(calls) == 2

    def test_operations_absorb_backend_errors(self, broken_cache: CacheService) -> None:
        assert broken_cache.lookup(CacheTier.SHORT, "k") is None
        assert broken_cache.store(CacheTier.SHORT, "k", "v") is False
        assert broken_cache.flush("all") == 0
        assert broken_cache.stats()["long"]["keys"] == 0
        assert broken_cache.is_healthy() is False


class TestKeyFunctions:
    """Key derivation is pure and matches the route bindings."""

    def test_keys(self) -> None:
        assert course_list_key(CacheRequest.get()) == "courses:list"
        assert course_by_id_key(CacheRequest.get(id="42")) == "course:42"
        assert notes_by_course_key(CacheRequest.get(course_id="42")) == "notes:course:42"
        assert summary_latest_key(CacheRequest.get(id="n7")) == "summary:latest:n7"

    def test_same_request_same_key(self) -> None:
        request = CacheRequest.get(id="42")
        assert course_by_id_key(request) == course_by_id_key(CacheRequest.get(id="42"))

    def test_route_tier_bindings(self) -> None:
        assert ROUTE_TIERS["course_list"][0] == CacheTier.MEDIUM
        assert ROUTE_TIERS["course_by_id"][0] == CacheTier.LONG
        assert ROUTE_TIERS["notes_by_course"][0] == CacheTier.SHORT
        assert ROUTE_TIERS["note_list"][0] == CacheTier.SHORT
        assert ROUTE_TIERS["summary_latest"][0] == CacheTier.LONG
