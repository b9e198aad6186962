"""
test_config.py - Config Routes 유닛 테스트

엔드포인트:
- GET /api/config
- POST /api/config
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.domain.schemas import Settings


class TestGetConfig:

    def test_missing_file_returns_empty_record(self, client: TestClient):
        response = client.get("/api/config")

        assert response.status_code == 200
        assert response.json() == {"deepseekApiKey": "", "plexelsApiKeys": []}

    def test_malformed_file_returns_generic_500(self, client: TestClient, settings: Settings):
        settings.config_path.write_text("[[[ broken", encoding="utf-8")

        response = client.get("/api/config")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to read config"}

    def test_non_utf8_file_returns_generic_500(self, client: TestClient, settings: Settings):
        settings.config_path.write_bytes(b'deepseekApiKey = "\xff\xfe"\n')

        response = client.get("/api/config")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to read config"}


class TestPostConfig:

    def test_write_then_read(self, client: TestClient, settings: Settings):
        payload = {"deepseekApiKey": "sk-abc", "plexelsApiKeys": ["p1", "p2"]}

        response = client.post("/api/config", json=payload)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert settings.config_path.exists()
        assert client.get("/api/config").json() == payload

    def test_single_string_key_read_back_as_list(self, client: TestClient):
        """POST {plexelsApiKeys: "single"} → ["single"]."""
        client.post("/api/config", json={"deepseekApiKey": "abc", "plexelsApiKeys": "single"})

        assert client.get("/api/config").json() == {
            "deepseekApiKey": "abc",
            "plexelsApiKeys": ["single"],
        }

    @pytest.mark.parametrize("value", [None, 7, {"k": "v"}, True])
    def test_non_list_value_read_back_as_empty(self, client: TestClient, value):
        response = client.post(
            "/api/config", json={"deepseekApiKey": "abc", "plexelsApiKeys": value}
        )

        assert response.status_code == 200
        assert client.get("/api/config").json()["plexelsApiKeys"] == []

    def test_omitted_value_read_back_as_empty(self, client: TestClient):
        client.post("/api/config", json={"deepseekApiKey": "abc"})

        assert client.get("/api/config").json() == {
            "deepseekApiKey": "abc",
            "plexelsApiKeys": [],
        }

    def test_creates_missing_config_dir(self, app, settings: Settings, tmp_path: Path):
        nested = tmp_path / "fresh" / "scripts"
        app.state.settings = Settings(config_dir=nested, output_root=settings.output_root)

        response = TestClient(app).post(
            "/api/config", json={"deepseekApiKey": "abc", "plexelsApiKeys": []}
        )

        assert response.status_code == 200
        assert (nested / "config.toml").exists()

    @pytest.mark.parametrize("body", [b"{not json", b"[1, 2]", b'"just a string"'])
    def test_non_object_body_returns_generic_500(
        self, client: TestClient, settings: Settings, body: bytes
    ):
        """JSON 객체가 아닌 body → 422가 아닌 500 {error}, 파일 미작성."""
        response = client.post(
            "/api/config", content=body, headers={"content-type": "application/json"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to write config"}
        assert not settings.config_path.exists()

    def test_write_failure_returns_generic_500(self, client: TestClient, settings: Settings):
        # config.toml 자리에 디렉터리 → rename 실패
        settings.config_path.mkdir()

        response = client.post(
            "/api/config", json={"deepseekApiKey": "abc", "plexelsApiKeys": []}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to write config"}
