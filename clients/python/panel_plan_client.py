# clients/python/panel_plan_client.py
import requests
from typing import Dict, Any, List, Optional, Tuple

class PanelPlanClient:
    """
    Client for the Panel Planner API.

    Attributes:
        base_url: Base URL of the API
        api_key: API key for authentication
        headers: Headers to include in all requests
    """

    def __init__(self, base_url: str, api_key: str, timeout: Optional[float] = 30.0):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            api_key: API key for authentication
            timeout: Seconds to wait for each request
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.headers = {"X-API-Key": api_key}

    def check_connection(self) -> Tuple[bool, str]:
        """
        Check if the API is accessible.

        Returns:
            Tuple of (success, message)
        """
        try:
            response = requests.get(
                f"{self.base_url}/health",
                headers=self.headers,
                timeout=self.timeout
            )
            if response.status_code == 200:
                return True, "Connection successful"
            else:
                return False, f"API returned status code {response.status_code}"
        except requests.RequestException as e:
            return False, f"Connection error: {str(e)}"

    def create_plan(
        self,
        walls: List[Dict[str, Any]],
        catalog: List[Dict[str, Any]],
        use_inventory: bool = False,
        merge_duplicates: bool = False
    ) -> Dict[str, Any]:
        """
        Request a panel plan.

        Args:
            walls: Wall dictionaries with at least a "length"
            catalog: Catalog entries with "width" and optional "height"/"count"
            use_inventory: Bound placements by the entries' counts
            merge_duplicates: Merge repeated widths within each chain

        Returns:
            Dictionary with the planned walls and total panel count

        Raises:
            requests.HTTPError: If the API request fails
        """
        response = requests.post(
            f"{self.base_url}/plans",
            json={
                "walls": walls,
                "catalog": catalog,
                "use_inventory": use_inventory,
                "merge_duplicates": merge_duplicates,
            },
            headers=self.headers,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def parse_catalog(self, csv_text: str, with_quantity: bool = False) -> List[Dict[str, Any]]:
        """
        Parse catalog CSV text on the server.

        Returns:
            List of catalog entry dictionaries

        Raises:
            requests.HTTPError: If the API request fails
        """
        response = requests.post(
            f"{self.base_url}/plans/catalog",
            json={"csv_text": csv_text, "with_quantity": with_quantity},
            headers=self.headers,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()["entries"]
