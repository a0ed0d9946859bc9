"""
Tests for the health and diagnostics endpoints.
"""

from dataclasses import replace


class TestHealthEndpoint:
    """GET /health answers regardless of provider state."""

    def test_health_returns_plaintext(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.text == "Server is running"
        assert response.headers["content-type"].startswith("text/plain")

    def test_health_without_api_key(self, make_client, settings_without_key, fake_generator):
        client = make_client(settings_without_key, fake_generator)

        assert client.get("/health").status_code == 200

    def test_health_with_failing_provider(self, make_client, settings, generator_factory):
        client = make_client(settings, generator_factory(error=RuntimeError("down")))

        assert client.get("/health").status_code == 200

    def test_module_level_app(self):
        from fastapi.testclient import TestClient

        from recommendation_proxy.main import app

        response = TestClient(app).get("/health")
        assert response.status_code == 200


class TestDiagnosticsEndpoints:
    """GET /test and POST /api/simple-test."""

    def test_status_endpoint(self, client):
        response = client.get("/test")

        assert response.status_code == 200
        assert response.json() == {"status": "Server is running!"}

    def test_simple_test_success(self, client, fake_generator):
        response = client.post("/api/simple-test", json={"prompt": "ping"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "text": "Fake recommendation"}
        assert fake_generator.calls == ["ping"]

    def test_simple_test_failure(self, make_client, settings, generator_factory, provider_failure):
        error = provider_failure("400 INVALID_ARGUMENT. API key not valid.", code=400)
        client = make_client(settings, generator_factory(error=error))

        response = client.post("/api/simple-test", json={"prompt": "ping"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "API Error",
            "details": "400 INVALID_ARGUMENT. API key not valid.",
            "status": 400,
        }

    def test_diagnostics_disabled(self, make_client, settings, fake_generator):
        client = make_client(replace(settings, enable_diagnostics=False), fake_generator)

        assert client.get("/test").status_code == 404
        assert client.post("/api/simple-test", json={"prompt": "ping"}).status_code == 404
        assert fake_generator.calls == []
