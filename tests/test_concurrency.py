"""
Concurrent submission tests.

Drives the ASGI app directly with httpx so many requests are in flight on
one event loop and contend for the store's reader/writer lock.
"""

import asyncio

import httpx
import pytest
import pytest_asyncio

from shortlink.main import create_app, load_store

from tests.conftest import SECRET, SERVER_NAME


@pytest.fixture
def loaded_app(settings):
    # ASGITransport does not run the lifespan, so load the store here
    app = create_app(settings)
    app.state.store = load_store(settings)
    return app


@pytest_asyncio.fixture
async def async_client(loaded_app):
    transport = httpx.ASGITransport(app=loaded_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


async def post_submit(client, url):
    response = await client.post("/submit", data={"secret": SECRET, "url": url})
    assert response.status_code == 200
    return response.text[len(SERVER_NAME) + 1:]


@pytest.mark.asyncio
async def test_concurrent_submissions_of_one_url_share_a_slug(async_client, loaded_app):
    """Test that racing submissions of one URL all receive the same slug."""
    slugs = await asyncio.gather(*(post_submit(async_client, "http://example.com") for _ in range(50)))
    assert len(set(slugs)) == 1
    assert len(loaded_app.state.store) == 1


@pytest.mark.asyncio
async def test_concurrent_submissions_of_distinct_urls(async_client, loaded_app, storage_path):
    """Test that racing submissions of distinct URLs get distinct, persisted slugs."""
    urls = [f"http://example.com/{i}" for i in range(50)]
    slugs = await asyncio.gather(*(post_submit(async_client, url) for url in urls))

    assert len(set(slugs)) == 50
    stored = dict(line.split(" ", 1) for line in storage_path.read_text(encoding="utf-8").splitlines())
    assert stored == dict(zip(slugs, urls))


@pytest.mark.asyncio
async def test_reads_during_writes(async_client):
    """Test that redirects keep working while submissions hold the write lock."""
    slug = await post_submit(async_client, "http://example.com/first")

    async def read():
        response = await async_client.get(f"/{slug}")
        return response.status_code

    results = await asyncio.gather(
        *(read() for _ in range(20)),
        *(post_submit(async_client, f"http://example.com/{i}") for i in range(20)),
    )
    assert results[:20] == [301] * 20
