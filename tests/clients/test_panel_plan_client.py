# File: tests/clients/test_panel_plan_client.py
"""Tests for the Python API client with requests mocked out."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from clients.python.panel_plan_client import PanelPlanClient


def mock_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


@pytest.fixture
def client():
    return PanelPlanClient("http://localhost:8000/", "dev_key")


class TestCheckConnection:
    """Tests for check_connection."""

    def test_success(self, client):
        with patch("clients.python.panel_plan_client.requests.get",
                   return_value=mock_response()) as mock_get:
            assert client.check_connection() == (True, "Connection successful")
        assert mock_get.call_args[0][0] == "http://localhost:8000/health"
        assert mock_get.call_args[1]["headers"] == {"X-API-Key": "dev_key"}

    def test_bad_status(self, client):
        with patch("clients.python.panel_plan_client.requests.get",
                   return_value=mock_response(503)):
            ok, message = client.check_connection()
        assert not ok
        assert "503" in message

    def test_connection_error(self, client):
        with patch("clients.python.panel_plan_client.requests.get",
                   side_effect=requests.ConnectionError("refused")):
            ok, message = client.check_connection()
        assert not ok
        assert "refused" in message


class TestCreatePlan:
    """Tests for create_plan."""

    def test_posts_request(self, client):
        payload = {"walls": [], "total_panels": 0}
        with patch("clients.python.panel_plan_client.requests.post",
                   return_value=mock_response(payload=payload)) as mock_post:
            result = client.create_plan([{"length": 22.0}], [{"width": 4.0}], use_inventory=True)

        assert result == payload
        assert mock_post.call_args[0][0] == "http://localhost:8000/plans"
        assert mock_post.call_args[1]["json"] == {
            "walls": [{"length": 22.0}],
            "catalog": [{"width": 4.0}],
            "use_inventory": True,
            "merge_duplicates": False,
        }

    def test_http_error_raised(self, client):
        with patch("clients.python.panel_plan_client.requests.post",
                   return_value=mock_response(401)):
            with pytest.raises(requests.HTTPError):
                client.create_plan([{"length": 22.0}], [])


class TestParseCatalog:
    """Tests for parse_catalog."""

    def test_returns_entries(self, client):
        entries = [{"width": 4.0, "height": None, "count": 2}]
        with patch("clients.python.panel_plan_client.requests.post",
                   return_value=mock_response(payload={"entries": entries})) as mock_post:
            assert client.parse_catalog("Panel Width,Qty\n4,2\n", with_quantity=True) == entries

        assert mock_post.call_args[0][0] == "http://localhost:8000/plans/catalog"
