import pytest

from config import settings
from datasources.exceptions import DataSourceUnavailable, InvalidQuery, QueryTimeout
from datasources.retry import retry


@pytest.fixture(autouse=True)
def no_delay(monkeypatch):
    monkeypatch.setattr(settings, "retry_delay_seconds", 0.0)


@pytest.mark.asyncio
async def test_retry_async_success_after_failure():
    calls = []

    @retry(attempts=3, delay=0.01, backoff=1, exceptions=(ValueError,))
    async def flaky(x):
        calls.append(x)
        if len(calls) < 2:
            raise ValueError("temporary")
        return x * 2

    result = await flaky(5)
    assert result == 10
    assert len(calls) == 2


def test_retry_sync_success_after_failure():
    calls = []

    @retry(attempts=4, delay=0.01, backoff=1, exceptions=(ValueError,))
    def flaky(x):
        calls.append(x)
        if len(calls) < 3:
            raise ValueError("oops")
        return x + 1

    result = flaky(7)
    assert result == 8
    assert len(calls) == 3


def test_retry_exhausted():
    @retry(attempts=2, delay=0.01, backoff=1, exceptions=(ValueError,))
    def always_fail():
        raise ValueError("nope")

    with pytest.raises(ValueError):
        always_fail()


@pytest.mark.asyncio
async def test_transient_errors_retried_by_default():
    calls = []

    @retry()
    async def fetch():
        calls.append(1)
        if len(calls) == 1:
            raise QueryTimeout("slow")
        if len(calls) == 2:
            raise DataSourceUnavailable("down")
        return "ok"

    assert await fetch() == "ok"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_client_errors_not_retried_by_default():
    calls = []

    @retry()
    async def fetch():
        calls.append(1)
        raise InvalidQuery("bad series id")

    with pytest.raises(InvalidQuery):
        await fetch()
    assert len(calls) == 1


def test_attempts_follow_settings(monkeypatch):
    monkeypatch.setattr(settings, "retry_attempts", 5)
    calls = []

    @retry()
    def fetch():
        calls.append(1)
        raise QueryTimeout("slow")

    with pytest.raises(QueryTimeout):
        fetch()
    assert len(calls) == 5
