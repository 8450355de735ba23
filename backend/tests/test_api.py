import time

import pytest

from backend.app.config import AppConfig, CorsConfig
from backend.app.main import create_app
from fastapi.testclient import TestClient


def _calculate(client, body: str):
    return client.request("GET", "/calculate", content=body.encode("utf-8"))


@pytest.mark.parametrize(
    "route, want_response, want_code",
    [
        (
            '[["SFO", "EWR"]]',
            {"short_path": ["SFO", "EWR"], "full_path": ["SFO", "EWR"]},
            200,
        ),
        (
            '[["ATL", "EWR"], ["SFO", "ATL"]]',
            {"short_path": ["SFO", "EWR"], "full_path": ["SFO", "ATL", "EWR"]},
            200,
        ),
        (
            '[["IND", "EWR"], ["SFO", "ATL"], ["GSO", "IND"], ["ATL", "GSO"]]',
            {
                "short_path": ["SFO", "EWR"],
                "full_path": ["SFO", "ATL", "GSO", "IND", "EWR"],
            },
            200,
        ),
        (
            '[["IND", "EWR"], ["SFO", "ATL"], ["SFO", "ATL"], ["GSO", "IND"], ["ATL", "GSO"]]',
            {
                "short_path": ["SFO", "EWR"],
                "full_path": ["SFO", "ATL", "GSO", "IND", "EWR"],
            },
            200,
        ),
        (
            '[["IND", "EWR"], ["SFO", "ATL"], ["SFO", "ATL"], ["SFO", "SFO"], ["GSO", "IND"], ["ATL", "GSO"]]',
            {"error": "edge would create a cycle"},
            400,
        ),
        ('["IND", "EWR"]', {"error": "wrong payload"}, 400),
        ("", {"error": "empty payload"}, 400),
        ('["IND", "EWR", "FDF"]', {"error": "wrong payload"}, 400),
        ('[["IND", "EWR"', {"error": "wrong payload"}, 400),
        ('[["IND", 7]]', {"error": "wrong payload"}, 400),
        ("null", {"error": "wrong payload"}, 400),
        ("[]", {"error": "wrong segments in payload"}, 400),
        ('[["IND", "EWR", "FDF"]]', {"error": "wrong segments in payload"}, 400),
        (
            '[["IND", "FDF"], ["DAD", "EED"]]',
            {"short_path": ["DAD", "EED"], "full_path": ["DAD", "EED"]},
            200,
        ),
    ],
)
def test_calculate_responses(client, route, want_response, want_code):
    response = _calculate(client, route)

    assert response.status_code == want_code
    assert response.json() == want_response


def test_calculate_body_is_compact_json(client):
    response = _calculate(client, '[["ATL", "EWR"], ["SFO", "ATL"]]')

    assert response.text == (
        '{"short_path":["SFO","EWR"],"full_path":["SFO","ATL","EWR"]}'
    )
    assert response.headers["content-type"].startswith("application/json")


def test_calculate_only_answers_get(client):
    response = client.post("/calculate", content=b'[["SFO", "EWR"]]')

    assert response.status_code == 405


def test_calculate_timeout_is_reported(client, monkeypatch):
    monkeypatch.setattr(
        "backend.app.services.path_service.deadline_from_timeout_ms",
        lambda timeout_ms: time.perf_counter() - 1.0,
    )

    response = _calculate(client, '[["SFO", "EWR"]]')

    assert response.status_code == 400
    assert response.json() == {"error": "calculation timed out"}


def test_request_id_is_echoed(client):
    response = _calculate(client, '[["SFO", "EWR"]]')
    assert response.headers["X-Request-ID"]

    response = client.request(
        "GET",
        "/calculate",
        content=b'[["SFO", "EWR"]]',
        headers={"X-Request-ID": "req-42"},
    )
    assert response.headers["X-Request-ID"] == "req-42"


def test_health(client, config):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": config.app_name}


def test_api_prefix_and_cors():
    config = AppConfig(
        api_prefix="/v1",
        cors=CorsConfig(allowed_origins=["http://example.com"]),
    )

    with TestClient(create_app(config)) as client:
        response = client.request(
            "GET",
            "/v1/calculate",
            content=b'[["SFO", "EWR"]]',
            headers={"Origin": "http://example.com"},
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://example.com"
