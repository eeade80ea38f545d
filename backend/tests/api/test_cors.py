"""CORS tests — browser prototypes on any origin can call the API."""


async def test_simple_request_allows_any_origin(client):
    res = await client.get("/api/tags", headers={"Origin": "http://localhost:3000"})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"


async def test_preflight_lists_methods(client):
    res = await client.options("/api/tags/1", headers={
        "Origin": "http://localhost:3000",
        "Access-Control-Request-Method": "DELETE",
        "Access-Control-Request-Headers": "Content-Type",
    })
    assert res.status_code == 200
    assert "DELETE" in res.headers["access-control-allow-methods"]
    assert res.headers["access-control-allow-origin"] == "*"


async def test_error_responses_carry_cors_headers(client):
    res = await client.get("/api/tags/999", headers={"Origin": "http://localhost:3000"})
    assert res.status_code == 404
    assert res.headers["access-control-allow-origin"] == "*"
