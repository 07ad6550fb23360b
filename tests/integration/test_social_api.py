"""Integration tests for the Wall of Thanks and direct messages."""

from __future__ import annotations

from httpx import AsyncClient


class TestThanks:
    async def test_feed_keeps_insertion_order(self, client: AsyncClient):
        messages = ["first", "second", "third"]
        for text in messages:
            response = await client.post("/thanks", json={"from": "demo", "to": "alex", "message": text})
            assert response.status_code == 200
            assert response.json() == {"success": True}

        response = await client.get("/thanks")
        assert response.status_code == 200
        entries = response.json()
        assert [e["message"] for e in entries] == messages
        assert entries[0]["from"] == "demo"
        assert entries[0]["to"] == "alex"
        assert entries[0]["id"]
        assert entries[0]["time"]

    async def test_empty_feed(self, client: AsyncClient):
        response = await client.get("/thanks")
        assert response.json() == []

    async def test_missing_message(self, client: AsyncClient):
        response = await client.post("/thanks", json={"from": "demo", "to": "alex"})
        assert response.status_code == 400

    async def test_empty_message(self, client: AsyncClient):
        response = await client.post("/thanks", json={"from": "demo", "to": "alex", "message": ""})
        assert response.status_code == 400
        assert (await client.get("/thanks")).json() == []


class TestMessages:
    async def test_send_and_read_conversation(self, client: AsyncClient):
        response = await client.post("/message", json={"fromId": "a", "toId": "b", "text": "hello"})
        assert response.status_code == 200
        sent = response.json()
        assert sent["text"] == "hello"
        assert sent["fromId"] == "a"

        await client.post("/message", json={"fromId": "b", "toId": "a", "text": "hey"})
        await client.post("/message", json={"fromId": "a", "toId": "c", "text": "elsewhere"})

        response = await client.get("/messages/b/a")
        assert [m["text"] for m in response.json()] == ["hello", "hey"]

    async def test_missing_text(self, client: AsyncClient):
        response = await client.post("/message", json={"fromId": "a", "toId": "b"})
        assert response.status_code == 400

    async def test_empty_conversation(self, client: AsyncClient):
        response = await client.get("/messages/x/y")
        assert response.status_code == 200
        assert response.json() == []
