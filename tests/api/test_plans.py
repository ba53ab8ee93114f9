# tests/api/test_plans.py
import pytest
from fastapi.testclient import TestClient

from api.main import app

# Create test client
client = TestClient(app)


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"

def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

def test_auth_required(sample_plan_request):
    """Test that authentication is required for planning endpoints."""
    # Missing header fails validation
    response = client.post("/plans", json=sample_plan_request)
    assert response.status_code == 422

    response = client.post("/plans", json=sample_plan_request,
                           headers={"X-API-Key": "invalid_key"})
    assert response.status_code == 401

def test_create_plan(api_headers, sample_plan_request):
    response = client.post("/plans", json=sample_plan_request, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["total_panels"] == 15

    first, second = data["walls"]
    assert first["height"] == 8.0
    assert first["color"] == {"hue": 0, "saturation": 0, "brightness": 255}
    assert first["chains"] == [[
        {"width": 4.0, "height": 0.0, "unit_count": 4},
        {"width": 6.0, "height": 0.0, "unit_count": 1},
    ]]
    assert [[panel["width"] for panel in chain] for chain in second["chains"]] == [[4.0], [6.0]]

def test_create_plan_with_merge(api_headers):
    request = {
        "walls": [{"length": 22.0}],
        "catalog": [{"width": 4.0}],
        "merge_duplicates": True,
    }
    response = client.post("/plans", json=request, headers=api_headers)
    assert response.status_code == 200
    assert response.json()["walls"][0]["chains"] == [[{"width": 4.0, "height": 0.0, "unit_count": 5}]]

def test_create_plan_with_inventory(api_headers):
    request = {
        "walls": [{"length": 24.0}],
        "catalog": [{"width": 6.0, "count": 3}, {"width": 4.0, "count": 10}],
        "use_inventory": True,
    }
    response = client.post("/plans", json=request, headers=api_headers)
    assert response.status_code == 200
    chains = response.json()["walls"][0]["chains"]
    assert chains == [[{"width": 4.0, "height": 0.0, "unit_count": 6}]]

def test_wall_without_fit_has_no_chains(api_headers):
    request = {"walls": [{"length": 2.0}], "catalog": [{"width": 4.0}]}
    response = client.post("/plans", json=request, headers=api_headers)
    assert response.status_code == 200
    assert response.json()["walls"][0]["chains"] == []
    assert response.json()["total_panels"] == 0

@pytest.mark.parametrize("request_body", [
    {"walls": [], "catalog": [{"width": 4.0}]},
    {"walls": [{"length": 0.0}], "catalog": [{"width": 4.0}]},
    {"walls": [{"length": 10.0}], "catalog": [{"width": -4.0}]},
    {"walls": [{"length": 10.0}], "catalog": [{"width": 4.0}], "use_inventory": True},
])
def test_invalid_plan_requests(api_headers, request_body):
    response = client.post("/plans", json=request_body, headers=api_headers)
    assert response.status_code == 422

def test_parse_catalog(api_headers):
    request = {"csv_text": "Name,Panel Width,Qty\nA,4,2\nB,6,\nC,8,x\n", "with_quantity": True}
    response = client.post("/plans/catalog", json=request, headers=api_headers)
    assert response.status_code == 200
    assert response.json()["entries"] == [
        {"width": 4.0, "height": None, "count": 2},
        {"width": 8.0, "height": None, "count": None},
    ]

def test_parse_catalog_without_header(api_headers):
    request = {"csv_text": "Name,Length\nA,4\n"}
    response = client.post("/plans/catalog", json=request, headers=api_headers)
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "validation_error"
