"""
API layer for the hosted nonprofit datastore.

Provides the low-level HTTP client and the read operations on the nonprofits table.
"""

import logging
from typing import Optional

from ..core import constants
from .client import APIClient
from .nonprofits import NonprofitsAPI


class DatastoreAPI(APIClient, NonprofitsAPI):
    """
    Unified API client for the nonprofit datastore.

    Combines the HTTP session with the nonprofit read operations.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "NonprofitsAPI",
    "DatastoreAPI",
]
