"""
Base API client for the hosted nonprofit datastore.

Handles HTTP requests, session management, and error handling.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants


class APIClient:
    """Base client for a PostgREST-style REST endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Project URL of the datastore (e.g. https://xyz.supabase.co)
            api_key: Public (anon) key sent with every request
            timeout: Request timeout in seconds
            max_retries: Maximum number of transport retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.verify_ssl = verify_ssl

        # Disable SSL warnings when verify_ssl is False
        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        # Setup session with retry strategy
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self._update_headers()

    def _update_headers(self) -> None:
        """Update session headers with the API key."""
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

        if self.api_key:
            self.session.headers.update({
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}"
            })

    def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            requests.exceptions.RequestException: On request failure
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('verify', self.verify_ssl)

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
            return response

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            Decoded JSON response
        """
        response = self._make_request("GET", endpoint, params=params)
        return response.json()

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
