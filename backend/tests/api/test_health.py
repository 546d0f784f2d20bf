"""
Tests for the monitoring endpoints.
"""


class TestMonitoring:

    def test_health_is_public(self, client, gateway):
        gateway.on("GET", "/health", json={"status": "healthy", "database": "ok"})

        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "ok"}

    def test_cookies_are_forwarded_verbatim(self, session_client, gateway):
        """Monitoring calls pass the browser's Cookie header, not a bearer token."""
        gateway.on("GET", "/stats", json={"documents": 3})

        session_client.get("/api/stats")

        sent = gateway.last
        assert "access_token=tok-1" in sent.headers["cookie"]
        assert "authorization" not in sent.headers

    def test_health_non_json_error(self, client, gateway):
        gateway.on("GET", "/health", status=503, text="Service Unavailable")

        response = client.get("/api/health")

        assert response.status_code == 503
        assert response.json() == {"detail": "Health check failed"}

    def test_stats_non_json_error(self, client, gateway):
        gateway.on("GET", "/stats", status=502, text="Bad Gateway")

        response = client.get("/api/stats")

        assert response.status_code == 502
        assert response.json() == {"detail": "Stats fetch failed"}

    def test_providers_status(self, client, gateway):
        gateway.on("GET", "/providers/status", json={"openai": "up", "ollama": "down"})

        response = client.get("/api/providers/status")

        assert response.status_code == 200
        assert response.json()["ollama"] == "down"

    def test_metrics_relayed_as_text(self, client, gateway):
        exposition = "# HELP requests_total Total requests\nrequests_total 7\n"
        gateway.on("GET", "/metrics", text=exposition)

        response = client.get("/api/metrics")

        assert response.status_code == 200
        assert response.text == exposition
        assert response.headers["content-type"] == "text/plain; version=0.0.4; charset=utf-8"

    def test_metrics_error_stays_json(self, client, gateway):
        gateway.on("GET", "/metrics", status=500, text="boom")

        response = client.get("/api/metrics")

        assert response.status_code == 500
        assert response.json() == {"detail": "Metrics fetch failed"}

    def test_backend_unreachable(self, client, gateway):
        gateway.fail("GET", "/health")

        response = client.get("/api/health")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
