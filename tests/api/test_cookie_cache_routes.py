"""Cookie and cache routes.

Invariants:
    - /cookies/set and /cookies/delete answer 302 → /cookies
    - Deletion cookies are expired, so a client jar drops them
    - /cache answers 304 with an empty body to conditional requests
"""


async def test_cookies_echoes_request_cookies(client):
    res = await client.get("/cookies", headers={"Cookie": "k1=v1; k2=v2"})
    assert res.status_code == 200
    assert res.json() == {"cookies": {"k1": "v1", "k2": "v2"}}


async def test_cookies_without_cookies_is_empty(client):
    res = await client.get("/cookies")
    assert res.json() == {"cookies": {}}


async def test_duplicate_cookie_names_keep_last_value(client):
    res = await client.get("/cookies", headers={"Cookie": "a=1; b=x; a=2"})
    assert res.json() == {"cookies": {"a": "2", "b": "x"}}


async def test_set_cookies_redirects_with_set_cookie(client):
    res = await client.get("/cookies/set?k1=v1&k2=v2")
    assert res.status_code == 302
    assert res.headers["location"] == "/cookies"
    set_cookies = res.headers.get_list("set-cookie")
    assert any(c.startswith("k1=v1;") for c in set_cookies)
    assert any(c.startswith("k2=v2;") for c in set_cookies)
    assert all("path=/" in c.lower() for c in set_cookies)


async def test_set_cookies_reach_the_client_jar(client):
    res = await client.get("/cookies/set?a=1&b=2", follow_redirects=True)
    assert res.url.path == "/cookies"
    assert res.json() == {"cookies": {"a": "1", "b": "2"}}


async def test_set_cookies_skips_invalid_names(client):
    res = await client.get("/cookies/set?a%20b=1&k1=v1")
    assert res.status_code == 302
    assert res.headers["location"] == "/cookies"
    set_cookies = res.headers.get_list("set-cookie")
    assert len(set_cookies) == 1
    assert set_cookies[0].startswith("k1=v1;")


async def test_delete_cookies_skips_invalid_names(client):
    res = await client.get("/cookies/delete?a%20b&k1")
    assert res.status_code == 302
    set_cookies = res.headers.get_list("set-cookie")
    assert len(set_cookies) == 1
    assert set_cookies[0].startswith("k1=")


async def test_delete_cookies_expires_them(client):
    await client.get("/cookies/set?k1=v1&k2=v2&k3=v3", follow_redirects=True)

    res = await client.get("/cookies/delete?k1&k2")
    assert res.status_code == 302
    assert res.headers["location"] == "/cookies"
    for header in res.headers.get_list("set-cookie"):
        assert "max-age=0" in header.lower()
        assert "1970" in header

    res = await client.get("/cookies")
    assert res.json() == {"cookies": {"k3": "v3"}}


async def test_cache_without_conditional_headers_is_get(client):
    res = await client.get("/cache?x=1")
    assert res.status_code == 200
    assert res.content
    assert res.json()["args"] == {"x": "1"}


async def test_cache_if_modified_since_is_304(client):
    res = await client.get(
        "/cache", headers={"If-Modified-Since": "Sat, 29 Oct 1994 19:43:31 GMT"},
    )
    assert res.status_code == 304
    assert res.content == b""


async def test_cache_if_none_match_is_304(client):
    res = await client.get("/cache", headers={"If-None-Match": "some-etag"})
    assert res.status_code == 304
    assert res.content == b""


async def test_cache_n_sets_cache_control(client):
    res = await client.get("/cache/5")
    assert res.status_code == 200
    assert res.headers["cache-control"] == "public, max-age=5"
    assert set(res.json()) == {"args", "headers", "origin"}
