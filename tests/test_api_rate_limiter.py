"""Tests for the API rate limiter."""

import asyncio
import time

import pytest

from metro_stay.adapters.api_rate_limiter import ApiRateLimiter


class TestApiRateLimiter:
    """Tests for ApiRateLimiter class."""

    @pytest.fixture(autouse=True)
    def reset_instances(self) -> None:
        """Reset the shared instances before each test."""
        ApiRateLimiter.reset()

    @pytest.mark.asyncio
    async def test_first_request_is_immediate(self) -> None:
        """Given a fresh limiter, when acquiring, then it does not wait."""
        limiter = ApiRateLimiter("test_api", min_delay_seconds=1.0)

        start = time.monotonic()
        await limiter.acquire()
        elapsed = time.monotonic() - start

        assert elapsed < 0.05

    @pytest.mark.asyncio
    async def test_second_request_waits_for_delay(self) -> None:
        """Given a recent request, when acquiring again, then it waits the minimum delay."""
        delay = 0.2
        limiter = ApiRateLimiter("test_api", min_delay_seconds=delay)

        await limiter.acquire()

        start = time.monotonic()
        await limiter.acquire()
        elapsed = time.monotonic() - start

        assert elapsed >= delay * 0.9

    @pytest.mark.asyncio
    async def test_request_after_delay_is_immediate(self) -> None:
        """Given the delay has passed, when acquiring, then it does not wait."""
        delay = 0.1
        limiter = ApiRateLimiter("test_api", min_delay_seconds=delay)

        await limiter.acquire()
        await asyncio.sleep(delay * 1.5)

        start = time.monotonic()
        await limiter.acquire()
        elapsed = time.monotonic() - start

        assert elapsed < 0.05

    @pytest.mark.asyncio
    async def test_shared_instance_returns_same_limiter(self) -> None:
        """Given one API name, when asking twice, then the same limiter is returned."""
        limiter1 = await ApiRateLimiter.get_instance("odpt_api", 0.2)
        limiter2 = await ApiRateLimiter.get_instance("odpt_api", 5.0)

        assert limiter1 is limiter2
        assert limiter1.min_delay_seconds == 0.2

    @pytest.mark.asyncio
    async def test_different_apis_get_different_limiters(self) -> None:
        """Given two API names, when asking for limiters, then they are independent."""
        limiter1 = await ApiRateLimiter.get_instance("odpt_api", 1.0)
        limiter2 = await ApiRateLimiter.get_instance("rakuten_api", 1.0)

        assert limiter1 is not limiter2

    @pytest.mark.asyncio
    async def test_reset_forgets_shared_limiters(self) -> None:
        """Given a shared limiter, when resetting, then a new limiter is created next time."""
        limiter1 = await ApiRateLimiter.get_instance("rakuten_api", 1.0)

        ApiRateLimiter.reset()
        limiter2 = await ApiRateLimiter.get_instance("rakuten_api", 1.0)

        assert limiter1 is not limiter2

    @pytest.mark.asyncio
    async def test_context_manager_acquires_on_enter(self) -> None:
        """Given a used limiter, when entering the context again, then it waits."""
        delay = 0.15
        limiter = ApiRateLimiter("context_test", min_delay_seconds=delay)

        async with limiter:
            pass

        start = time.monotonic()
        async with limiter:
            elapsed = time.monotonic() - start

        assert elapsed >= delay * 0.9

    @pytest.mark.asyncio
    async def test_concurrent_requests_are_serialized(self) -> None:
        """Given concurrent callers, when acquiring, then they are released one delay apart."""
        delay = 0.1
        limiter = ApiRateLimiter("concurrent_test", min_delay_seconds=delay)

        results: list[float] = []
        start = time.monotonic()

        async def make_request() -> None:
            await limiter.acquire()
            results.append(time.monotonic() - start)

        await asyncio.gather(make_request(), make_request(), make_request())

        assert len(results) == 3
        results.sort()
        assert results[0] < 0.05
        assert results[1] >= delay * 0.8
        assert results[2] >= delay * 1.6

    @pytest.mark.asyncio
    async def test_different_apis_dont_block_each_other(self) -> None:
        """Given two APIs, when one was just used, then the other is still immediate."""
        delay = 0.2
        limiter_a = await ApiRateLimiter.get_instance("api_a", delay)
        limiter_b = await ApiRateLimiter.get_instance("api_b", delay)

        await limiter_a.acquire()

        start = time.monotonic()
        await limiter_b.acquire()
        elapsed = time.monotonic() - start

        assert elapsed < 0.05
