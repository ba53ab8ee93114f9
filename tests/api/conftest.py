# tests/api/conftest.py
import pytest
import sys
import os
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"

@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": "dev_key"}

@pytest.fixture
def sample_plan_request():
    """Two walls against a two-width wishlist."""
    return {
        "walls": [
            {"length": 22.0, "height": 8.0, "color": {"hue": 0, "saturation": 0, "brightness": 255}},
            {"length": 24.0},
        ],
        "catalog": [{"width": 4.0}, {"width": 6.0}],
    }
