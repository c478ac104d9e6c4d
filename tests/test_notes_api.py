"""
Notes API: HTTP Endpoint Tests
================================

What:  Exercises every route through the full middleware and handler stack.
How:   HTTPX AsyncClient over ASGITransport (no server process).

What we test:
    ✅ The create → list → patch → delete scenario, status by status
    ✅ Body shape and JSON errors (400 / 422) and the 16 KiB cap (413)
    ✅ PATCH {} is 422 whether or not the id exists
    ✅ Unknown ids are 404 on PATCH and DELETE
    ✅ Bad id segments, unknown paths and wrong methods are 404 with no body
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from notes_api.config import Settings
from notes_api.main import create_app


class TestScenario:
    """The canonical create/list/update/delete walk-through."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, test_client):
        r = await test_client.post("/notes", json={"title": "Lorem Ipsum"})
        assert r.status_code == 201
        assert r.json() == {"id": 1, "title": "Lorem Ipsum", "content": ""}

        r = await test_client.get("/notes")
        assert r.status_code == 200
        assert r.json() == [{"id": 1, "title": "Lorem Ipsum", "content": ""}]

        r = await test_client.patch("/notes/1", json={"content": "hi"})
        assert r.status_code == 204
        assert r.content == b""

        r = await test_client.get("/notes")
        assert r.json() == [{"id": 1, "title": "Lorem Ipsum", "content": "hi"}]

        r = await test_client.delete("/notes/1")
        assert r.status_code == 204
        assert r.content == b""

        r = await test_client.get("/notes")
        assert r.status_code == 200
        assert r.json() == []

        r = await test_client.delete("/notes/1")
        assert r.status_code == 404


class TestListAndCreate:
    """GET /notes and POST /notes."""

    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        r = await test_client.get("/notes")

        assert r.status_code == 200
        assert r.json() == []

    @pytest.mark.asyncio
    async def test_create_with_content_round_trips(self, test_client):
        r = await test_client.post("/notes", json={"title": "t", "content": "c"})
        assert r.status_code == 201

        r = await test_client.get("/notes")
        assert r.json() == [{"id": 1, "title": "t", "content": "c"}]

    @pytest.mark.asyncio
    async def test_empty_title_is_allowed(self, test_client):
        r = await test_client.post("/notes", json={"title": ""})

        assert r.status_code == 201
        assert r.json()["title"] == ""

    @pytest.mark.asyncio
    async def test_missing_title_is_422(self, test_client):
        r = await test_client.post("/notes", json={"content": "no title"})

        assert r.status_code == 422
        assert r.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, test_client):
        r = await test_client.post(
            "/notes",
            content=b'{"title": ',
            headers={"Content-Type": "application/json"},
        )

        assert r.status_code == 400
        assert r.json()["error"] == "bad_request"

    @pytest.mark.asyncio
    async def test_oversized_body_is_413(self, test_client):
        r = await test_client.post("/notes", json={"title": "big", "content": "x" * 20_000})

        assert r.status_code == 413
        assert r.json()["error"] == "payload_too_large"
        assert r.json()["details"]["limit"] == 16 * 1024

        # Nothing was stored.
        r = await test_client.get("/notes")
        assert r.json() == []

    @pytest.mark.asyncio
    async def test_oversized_malformed_body_is_413_not_400(self, test_client):
        r = await test_client.post(
            "/notes",
            content=b"{" * 17_000,
            headers={"Content-Type": "application/json"},
        )

        assert r.status_code == 413

    @pytest.mark.asyncio
    async def test_body_at_limit_is_accepted(self):
        app = create_app(Settings(_env_file=None, max_body_bytes=64, log_level="WARNING"))

        body = b'{"title": "' + b"a" * (64 - len(b'{"title": ""}')) + b'"}'
        assert len(body) == 64

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.post("/notes", content=body, headers={"Content-Type": "application/json"})
            assert r.status_code == 201

            r = await client.post(
                "/notes",
                content=body[:-2] + b'a"}',
                headers={"Content-Type": "application/json"},
            )
            assert r.status_code == 413

    @pytest.mark.asyncio
    async def test_concurrent_creates_over_http(self, test_client):
        responses = await asyncio.gather(
            *(test_client.post("/notes", json={"title": f"n{i}"}) for i in range(25))
        )

        assert all(r.status_code == 201 for r in responses)
        ids = [r.json()["id"] for r in responses]
        assert sorted(ids) == list(range(1, 26))


class TestUpdate:
    """PATCH /notes/{id}."""

    @pytest.mark.asyncio
    async def test_title_only_keeps_content(self, test_client):
        await test_client.post("/notes", json={"title": "old", "content": "body"})

        r = await test_client.patch("/notes/1", json={"title": "new"})
        assert r.status_code == 204

        r = await test_client.get("/notes")
        assert r.json() == [{"id": 1, "title": "new", "content": "body"}]

    @pytest.mark.asyncio
    async def test_empty_body_is_422_for_existing_id(self, test_client):
        await test_client.post("/notes", json={"title": "t"})

        r = await test_client.patch("/notes/1", json={})

        assert r.status_code == 422
        assert r.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_empty_body_is_422_for_unknown_id(self, test_client):
        r = await test_client.patch("/notes/999", json={})

        assert r.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_id_is_404(self, test_client):
        r = await test_client.patch("/notes/999", json={"title": "x"})

        assert r.status_code == 404
        assert r.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_wrong_field_type_is_422(self, test_client):
        await test_client.post("/notes", json={"title": "t"})

        r = await test_client.patch("/notes/1", json={"title": 5})

        assert r.status_code == 422


class TestDelete:
    """DELETE /notes/{id}."""

    @pytest.mark.asyncio
    async def test_never_created_is_404(self, test_client):
        r = await test_client.delete("/notes/1")

        assert r.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_keeps_other_notes(self, test_client):
        for title in ("a", "b", "c"):
            await test_client.post("/notes", json={"title": title})

        r = await test_client.delete("/notes/2")
        assert r.status_code == 204

        r = await test_client.get("/notes")
        assert [n["id"] for n in r.json()] == [1, 3]

        r = await test_client.post("/notes", json={"title": "d"})
        assert r.json()["id"] == 4


class TestUnmatchedRoutes:
    """Everything outside the four operations is a bare 404."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/"),
            ("GET", "/unknown"),
            ("GET", "/notes/1"),
            ("PUT", "/notes"),
            ("DELETE", "/notes"),
            ("POST", "/notes/1"),
            ("PATCH", "/notes/abc"),
            ("PATCH", "/notes/-1"),
            ("DELETE", "/notes/1.5"),
            ("GET", "/notes/"),
            ("POST", "/notes/"),
            ("PATCH", "/notes/1/"),
            ("DELETE", "/notes/1/"),
            ("HEAD", "/notes"),
            ("GET", "/docs"),
            ("GET", "/openapi.json"),
        ],
    )
    async def test_not_found_without_body(self, test_client, method, path):
        body = {"title": "x"} if method in ("PATCH", "PUT", "POST") else None
        r = await test_client.request(method, path, json=body)

        assert r.status_code == 404
        assert r.content == b""


class TestIsolation:
    """Each app owns its own store."""

    @pytest.mark.asyncio
    async def test_two_apps_do_not_share_notes(self, test_settings):

        first = create_app(test_settings)
        second = create_app(test_settings)

        async with AsyncClient(transport=ASGITransport(app=first), base_url="http://test") as c1, \
                AsyncClient(transport=ASGITransport(app=second), base_url="http://test") as c2:
            await c1.post("/notes", json={"title": "only in first"})

            assert len((await c1.get("/notes")).json()) == 1
            assert (await c2.get("/notes")).json() == []
