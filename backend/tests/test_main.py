"""
Tests for the terminal session client's cookie persistence.
"""

import json

import httpx

from main import load_cookies, save_cookies


class TestCookiePersistence:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "state" / "cookies.json"
        client = httpx.AsyncClient()
        client.cookies.set("access_token", "tok-1", domain="gateway.local", path="/")

        save_cookies(client, path)
        restored = httpx.AsyncClient()
        load_cookies(restored, path)

        assert json.loads(path.read_text()) == [
            {"name": "access_token", "value": "tok-1", "domain": "gateway.local", "path": "/"}
        ]
        assert restored.cookies.get("access_token", domain="gateway.local") == "tok-1"

    def test_empty_jar_removes_file(self, tmp_path):
        path = tmp_path / "cookies.json"
        path.write_text(json.dumps([{"name": "access_token", "value": "old", "domain": "", "path": "/"}]))

        save_cookies(httpx.AsyncClient(), path)

        assert not path.exists()

    def test_missing_file_is_ignored(self, tmp_path):
        client = httpx.AsyncClient()

        load_cookies(client, tmp_path / "absent.json")

        assert len(client.cookies) == 0

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "cookies.json"
        path.write_text("{not json")
        client = httpx.AsyncClient()

        load_cookies(client, path)

        assert len(client.cookies) == 0

    def test_partial_entries_are_dropped(self, tmp_path):
        path = tmp_path / "cookies.json"
        path.write_text(json.dumps([
            {"name": "access_token", "value": "tok-1", "domain": "gateway.local", "path": "/"},
            {"name": "other"},
        ]))
        client = httpx.AsyncClient()

        load_cookies(client, path)

        assert len(client.cookies) == 0
