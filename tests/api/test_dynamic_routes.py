"""Dynamic routes: /bytes, /delay, /stream, /drip.

Invariants:
    - /bytes/n returns exactly n bytes; a seed makes the output reproducible
    - /delay never sleeps past the configured ceiling
    - Each app reads its own tunables; concurrent apps do not interfere
    - A sleeping request does not hold up other requests
"""

import asyncio
import json
import time

import pytest

from httpbin_app.config import Settings


# ─── /bytes ──────────────────────────────────────────────────────

@pytest.mark.parametrize("size", [0, 1, 1023, 1024, 1025, 1024 * 1024])
async def test_bytes_size(client, size):
    res = await client.get(f"/bytes/{size}")
    assert res.status_code == 200
    assert len(res.content) == size
    assert res.headers["content-length"] == str(size)
    assert res.headers["content-type"] == "application/octet-stream"


async def test_bytes_same_seed_same_body(client):
    first = await client.get("/bytes/1024?seed=1")
    second = await client.get("/bytes/1024?seed=1")
    assert first.content == second.content


async def test_bytes_without_seed_differ(client):
    first = await client.get("/bytes/1024")
    second = await client.get("/bytes/1024")
    assert first.content != second.content


async def test_bytes_malformed_seed_is_rejected(client):
    res = await client.get("/bytes/16?seed=abc")
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "query.seed"


# ─── /delay ──────────────────────────────────────────────────────

async def test_delay_supports_fractional_seconds(client):
    start = time.monotonic()
    res = await client.get("/delay/0.5")
    elapsed = time.monotonic() - start
    assert res.status_code == 200
    assert 0.45 <= elapsed < 1.2
    assert set(res.json()) == {"args", "headers", "origin"}


async def test_delay_is_capped_by_settings(make_client):
    async with make_client(Settings(delay_max_seconds=0.3)) as c:
        start = time.monotonic()
        res = await c.get("/delay/20")
        elapsed = time.monotonic() - start
    assert res.status_code == 200
    assert 0.25 <= elapsed < 1.0


async def test_apps_keep_independent_ceilings(make_client):
    async def timed(settings):
        async with make_client(settings) as c:
            start = time.monotonic()
            await c.get("/delay/5")
            return time.monotonic() - start

    short, long = await asyncio.gather(
        timed(Settings(delay_max_seconds=0.1)),
        timed(Settings(delay_max_seconds=0.4)),
    )
    assert short < 0.35
    assert long >= 0.35


async def test_delay_does_not_block_other_requests(client):
    async def timed_get():
        start = time.monotonic()
        await client.get("/get")
        return time.monotonic() - start

    _, get_elapsed = await asyncio.gather(client.get("/delay/0.6"), timed_get())
    assert get_elapsed < 0.3


async def test_delay_rejects_non_numeric_segment(client):
    res = await client.get("/delay/soon")
    assert res.status_code == 404


# ─── /stream ─────────────────────────────────────────────────────

async def test_stream_writes_n_json_lines(client, settings):
    total = 5
    start = time.monotonic()
    res = await client.get(f"/stream/{total}")
    elapsed = time.monotonic() - start

    lines = res.text.splitlines()
    assert res.status_code == 200
    assert len(lines) == total
    assert res.text.endswith("\n")
    messages = [json.loads(line) for line in lines]
    assert [m["n"] for m in messages] == list(range(total))
    assert all(m["time"].endswith("Z") for m in messages)
    assert elapsed >= 0.9 * total * settings.stream_interval_seconds


async def test_stream_zero_is_empty(client):
    res = await client.get("/stream/0")
    assert res.status_code == 200
    assert res.content == b""


# ─── /drip ───────────────────────────────────────────────────────

async def test_drip_with_code(client):
    res = await client.get("/drip?numbytes=10&duration=0.1&code=500")
    assert res.status_code == 500
    assert res.content == b"*" * 10


async def test_drip_spreads_bytes_over_duration(client):
    start = time.monotonic()
    res = await client.get("/drip?numbytes=4&duration=0.4")
    elapsed = time.monotonic() - start
    assert res.status_code == 200
    assert res.content == b"****"
    assert elapsed >= 0.35


async def test_drip_honours_initial_delay(client):
    start = time.monotonic()
    res = await client.get("/drip?numbytes=1&duration=0&delay=0.3")
    elapsed = time.monotonic() - start
    assert res.content == b"*"
    assert elapsed >= 0.25


async def test_drip_zero_bytes_is_empty(client):
    res = await client.get("/drip?numbytes=0&duration=5")
    assert res.status_code == 200
    assert res.content == b""


@pytest.mark.parametrize(
    "query",
    [
        "numbytes=abc&duration=1",
        "numbytes=5",
        "numbytes=5&duration=1&delay=later",
        "numbytes=5&duration=1&code=teapot",
        "numbytes=-1&duration=1",
    ],
)
async def test_drip_rejects_malformed_query(client, query):
    res = await client.get(f"/drip?{query}")
    assert res.status_code == 400
    assert "error" in res.json()
