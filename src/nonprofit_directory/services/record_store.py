"""
Record store service.

Provides the one bulk read that feeds the directory: every organization
record, converted to the canonical model.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Protocol, TYPE_CHECKING

import requests  # type: ignore

from ..core import constants
from ..models import Organization
from ..processing.ingestion import RecordIngestor

if TYPE_CHECKING:
    from ..api import DatastoreAPI


class RecordStoreError(RuntimeError):
    """Raised when the record collection cannot be read."""


class RecordStore(Protocol):
    """Anything that can return the full organization collection."""

    def fetch_all(self) -> List[Organization]:
        ...


class SupabaseRecordStore:
    """Read all organizations from the hosted datastore."""

    def __init__(
        self,
        api_client: "DatastoreAPI",
        table: str = constants.DEFAULT_TABLE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize record store.

        Args:
            api_client: API client instance
            table: Table holding organization rows
            logger: Logger instance
        """
        self.api_client = api_client
        self.table = table
        self.logger = logger or logging.getLogger(__name__)
        self.ingestor = RecordIngestor(logger)

    def fetch_all(self) -> List[Organization]:
        """
        Fetch and ingest the full collection.

        Returns:
            List of Organization records

        Raises:
            RecordStoreError: If the request fails or the body is malformed
        """
        try:
            rows = self.api_client.get_nonprofits(self.table)
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RecordStoreError(f"Failed to fetch nonprofits from '{self.table}': {e}") from e

        records = self.ingestor.ingest(rows)
        self.logger.info(f"Fetched {len(records)} nonprofits")
        return records


class JsonFileStore:
    """Read all organizations from a local JSON export of the table."""

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """
        Initialize file-backed record store.

        Args:
            path: JSON file holding a list of rows, or an object with a
                'nonprofits' list
            logger: Logger instance
        """
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)
        self.ingestor = RecordIngestor(logger)

    def fetch_all(self) -> List[Organization]:
        """
        Read and ingest the file.

        Returns:
            List of Organization records

        Raises:
            RecordStoreError: If the file is missing, unreadable or malformed
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload: Any = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RecordStoreError(f"Failed to read nonprofits from {self.path}: {e}") from e

        if isinstance(payload, dict):
            payload = payload.get("nonprofits")
        if not isinstance(payload, list):
            raise RecordStoreError(f"{self.path} does not contain a list of nonprofits")

        records = self.ingestor.ingest(payload)
        self.logger.info(f"Loaded {len(records)} nonprofits from {self.path}")
        return records
