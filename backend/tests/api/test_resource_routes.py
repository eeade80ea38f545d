"""Resource route tests — CRUD, filtering and error envelopes over HTTP.

Tests cover:
    - GET list envelope, default limits, filters, search, pagination params
    - Non-integer limit/offset → 400 {"errors": [...]}; negative values clamp to 0
    - GET item; unknown and non-integer ids → 404 {"error": "<Label> not found"}
    - POST → 201 with the new record; invalid bodies → 400 {"errors": [...]}
    - Empty / malformed JSON and NaN / Infinity → 400 ["Invalid JSON payload"], store unchanged
    - Path ids must be plain digits ("1_0", "+1" → 404)
    - PUT merges, keeps id; 404 beats body validation
    - DELETE → {"message", "<singular>"} then 404
"""

import pytest


async def test_list_envelope(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    data = res.json()
    assert set(data) == {"total", "limit", "offset", "results"}
    assert data["total"] == 10
    assert data["limit"] == 100
    assert data["offset"] == 0
    assert [u["id"] for u in data["results"]] == list(range(1, 11))


@pytest.mark.parametrize("path", ["/api/albums", "/api/photos", "/api/todos"])
async def test_small_default_limits(client, path):
    data = (await client.get(path)).json()
    assert data["limit"] == 10
    assert len(data["results"]) == 10


async def test_limit_and_offset(client):
    data = (await client.get("/api/todos?limit=3&offset=5")).json()
    assert data["total"] == 20
    assert [t["id"] for t in data["results"]] == [6, 7, 8]


async def test_negative_pagination_clamps(client):
    data = (await client.get("/api/todos?limit=-1&offset=-4")).json()
    assert data["limit"] == 0
    assert data["offset"] == 0
    assert data["results"] == []


async def test_offset_past_end(client):
    data = (await client.get("/api/users?offset=500")).json()
    assert data["results"] == []
    assert data["total"] == 10


async def test_non_integer_limit_is_400(client):
    res = await client.get("/api/users?limit=abc")
    assert res.status_code == 400
    errors = res.json()["errors"]
    assert len(errors) == 1
    assert errors[0].startswith("query.limit:")


async def test_filter_and_search(client):
    data = (await client.get("/api/posts?tag=api")).json()
    assert [p["id"] for p in data["results"]] == [1, 4, 6]
    data = (await client.get("/api/posts?category=TECHNOLOGY")).json()
    assert [p["id"] for p in data["results"]] == [1, 4, 6, 9]
    data = (await client.get("/api/users?q=clement")).json()
    assert [u["id"] for u in data["results"]] == [3, 10]


async def test_product_category_filter(client):
    data = (await client.get("/api/products?category=electronics")).json()
    assert [p["id"] for p in data["results"]] == [1, 2, 3]


async def test_order_status_filter(client):
    data = (await client.get("/api/orders?status=Processing")).json()
    assert data["total"] == 2
    data = (await client.get("/api/orders?userId=1")).json()
    assert [o["id"] for o in data["results"]] == [1, 4]


async def test_empty_filter_value_is_ignored(client):
    data = (await client.get("/api/posts?userId=")).json()
    assert data["total"] == 12


async def test_get_item(client):
    res = await client.get("/api/categories/2")
    assert res.status_code == 200
    assert res.json()["name"] == "Books"


@pytest.mark.parametrize("path,label", [
    ("/api/users/999", "User"),
    ("/api/categories/abc", "Category"),
    ("/api/todos/1.5", "Todo"),
])
async def test_unknown_id_is_404(client, path, label):
    res = await client.get(path)
    assert res.status_code == 404
    assert res.json() == {"error": f"{label} not found"}


async def test_create_returns_201(client):
    res = await client.post("/api/tags", json={"name": "python"})
    assert res.status_code == 201
    assert res.json() == {"id": 9, "name": "python"}
    assert (await client.get("/api/tags/9")).json()["name"] == "python"


async def test_create_ignores_client_id(client):
    res = await client.post("/api/tags", json={"id": 1, "name": "dup"})
    assert res.json()["id"] == 9
    assert (await client.get("/api/tags/1")).json()["name"] == "api"


async def test_create_validation_errors(client):
    res = await client.post("/api/products", json={"title": "Lamp", "price": -2})
    assert res.status_code == 400
    fields = {e.split(":")[0] for e in res.json()["errors"]}
    assert fields == {"description", "price", "image", "category", "stock"}


async def test_create_non_object_body(client):
    res = await client.post("/api/tags", json=[{"name": "x"}])
    assert res.status_code == 400
    assert res.json() == {"errors": ["Invalid body format"]}


@pytest.mark.parametrize("content", [b"", b"{not json", b"   "])
async def test_malformed_json_body(client, content):
    res = await client.post(
        "/api/tags", content=content, headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"errors": ["Invalid JSON payload"]}


async def test_update_merges_and_keeps_id(client):
    res = await client.put("/api/products/3", json={"stock": 12, "id": 77})
    assert res.status_code == 200
    product = res.json()
    assert product["id"] == 3
    assert product["stock"] == 12
    assert product["category"] == "Electronics"
    assert (await client.get("/api/products/77")).status_code == 404


async def test_update_missing_record_beats_bad_body(client):
    res = await client.put(
        "/api/products/999", content=b"{oops", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "Product not found"}


async def test_update_invalid_field(client):
    res = await client.put("/api/reviews/1", json={"rating": 0})
    assert res.status_code == 400
    assert res.json()["errors"][0].startswith("rating:")


async def test_update_rejects_dangling_reference(client):
    res = await client.put("/api/comments/1", json={"postId": 500})
    assert res.status_code == 400
    assert res.json() == {"errors": ["Invalid postId: post 500 does not exist"]}


async def test_delete_then_404(client):
    res = await client.delete("/api/categories/5")
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Category deleted"
    assert body["category"]["name"] == "Sports"
    assert (await client.get("/api/categories/5")).status_code == 404
    second = await client.delete("/api/categories/5")
    assert second.status_code == 404
    assert second.json() == {"error": "Category not found"}


async def test_deleted_id_is_not_reused(client):
    await client.delete("/api/tags/8")
    res = await client.post("/api/tags", json={"name": "rust"})
    assert res.json()["id"] == 9


@pytest.mark.parametrize("path", ["/api/users", "/api/users/1", "/api/users/999"])
async def test_options_is_204(client, path):
    res = await client.options(path)
    assert res.status_code == 204
    assert res.content == b""


async def test_pretty_printed_json(client):
    res = await client.get("/api/tags/1")
    assert res.headers["content-type"].startswith("application/json")
    assert res.text.startswith("{\n  ")


@pytest.mark.parametrize("path", ["/api/users/1_0", "/api/users/+1", "/api/users/%201"])
async def test_id_must_be_plain_digits(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


PRODUCT_WITH_INFINITE_PRICE = (
    b'{"title": "Lamp", "description": "Desk lamp", "price": Infinity,'
    b' "image": "https://img/lamp.png", "category": "Home", "stock": 1}'
)


@pytest.mark.parametrize("path,content", [
    ("/api/products", PRODUCT_WITH_INFINITE_PRICE),
    ("/api/products", PRODUCT_WITH_INFINITE_PRICE.replace(b"Infinity", b"1e999")),
    ("/api/users", b'{"name": "A", "username": "a", "email": "a@x.io", "score": NaN}'),
    ("/api/users", b'{"name": "A", "username": "a", "email": "a@x.io", "score": -Infinity}'),
])
async def test_non_finite_numbers_are_rejected(client, path, content):
    before = (await client.get(path)).json()
    res = await client.post(
        path, content=content, headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"errors": ["Invalid JSON payload"]}
    after = await client.get(path)
    assert after.status_code == 200
    assert after.json() == before


async def test_update_with_non_finite_number_keeps_record(client):
    before = (await client.get("/api/orders/1")).json()
    res = await client.put(
        "/api/orders/1", content=b'{"totalPrice": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert (await client.get("/api/orders/1")).json() == before
