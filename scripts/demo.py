#!/usr/bin/env python3
"""
Demo script for learnhub.

This script walks through the tiered response cache and the summarization
fallbacks. It needs no Redis and no API key: the cache runs in memory and
the summarizer is forced into its offline mode.
"""

import asyncio
import time

from learnhub.entities import BatchItem, CacheTier
from learnhub.repositories import HuggingFaceSummarizationProvider, InMemoryCacheStore
from learnhub.services import CacheRequest, CacheService, SummarizationService
from learnhub.services.cache_keys import course_by_id_key, course_list_key

LECTURE_NOTES = (
    "Photosynthesis converts light energy into chemical energy. "
    "It takes place in the chloroplasts of plant cells. "
    "Chlorophyll absorbs mostly blue and red light. "
    "The light reactions produce ATP and NADPH. "
    "The Calvin cycle uses that energy to fix carbon dioxide. "
    "Glucose is the main product of the Calvin cycle. "
    "Oxygen is released as a by-product of splitting water. "
    "Photosynthesis rates depend on light, temperature and carbon dioxide. "
    "Plants, algae and some bacteria perform photosynthesis. "
    "Almost all life on Earth depends on it."
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_tiered_cache() -> None:
    """Demonstrate read-through caching and invalidation."""
    print_section("Tiered Response Cache")

    cache = CacheService.create(store=InMemoryCacheStore.create())
    courses = {"1": {"id": "1", "title": "Biology 101"}}
    calls = {"count": 0}

    def load_courses() -> list[dict]:
        calls["count"] += 1
        time.sleep(0.05)  # pretend this is a slow query
        return list(courses.values())

    cached_list = cache.wrap(CacheTier.MEDIUM, course_list_key)

    print("\n📚 Listing courses three times...")
    for _ in range(3):
        start = time.time()
        result = await cached_list(CacheRequest.get(), load_courses)
        print(f"  {len(result)} course(s) in {(time.time() - start) * 1000:.1f}ms")
    print(f"  Underlying query ran {calls['count']} time(s)")

    print("\n✏️  Creating a course and flushing all tiers...")
    courses["2"] = {"id": "2", "title": "Chemistry 101"}
    print(f"  Flushed {cache.flush('all')} entr(ies)")
    result = await cached_list(CacheRequest.get(), load_courses)
    print(f"  Now {len(result)} course(s), query ran {calls['count']} time(s)")

    print("\n🚫 Missing resources are never cached:")
    cached_course = cache.wrap(CacheTier.LONG, course_by_id_key)

    def load_missing() -> dict:
        raise LookupError("course 99 not found")

    for _ in range(2):
        try:
            await cached_course(CacheRequest.get(id="99"), load_missing)
        except LookupError as e:
            print(f"  ✗ {e}")

    print("\n📊 Stats:")
    for tier, values in cache.stats().items():
        print(f"  {tier:<7} hits={values['hits']} misses={values['misses']} keys={values['keys']}")


async def demo_summarization() -> None:
    """Demonstrate the offline summarization fallbacks."""
    print_section("Summarization (offline fallback)")

    provider = HuggingFaceSummarizationProvider(api_key="")
    service = SummarizationService.create(provider=provider)
    status = service.test_connection()
    print(f"\n🔌 Provider: {status.provider} / {status.model} (configured: {status.available})")

    print("\n📝 Standard summary (max 20 words):")
    print(f"  {await service.summarize(LECTURE_NOTES, max_length=20)}")

    print("\n• Bullet points:")
    for line in (await service.bullet_points(LECTURE_NOTES)).splitlines():
        print(f"  {line}")

    print("\n🔑 Key concepts:")
    print(f"  {', '.join(await service.key_concepts(LECTURE_NOTES))}")

    print("\n❓ Study questions:")
    for question in await service.study_questions(LECTURE_NOTES):
        print(f"  {question}")

    print("\n📦 Batch (second note is empty):")
    result = await service.batch_summarize(
        [
            BatchItem(id="n1", content=LECTURE_NOTES),
            BatchItem(id="n2", content="   "),
            BatchItem(id="n3", content="Short note about enzymes."),
        ],
        kind="standard",
        max_length=20,
    )
    print(f"  processed={result.total_processed} success_rate={result.success_rate}")
    for failure in result.failed:
        print(f"  ✗ {failure['note_id']}: {failure['error']}")


def main() -> None:
    """Run all demos."""
    print("\n🚀 LearnHub Demo")
    print("=" * 70)

    asyncio.run(demo_tiered_cache())
    asyncio.run(demo_summarization())

    print("\n" + "=" * 70)
    print("✅ Demo completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
