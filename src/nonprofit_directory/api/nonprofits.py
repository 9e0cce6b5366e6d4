"""
Nonprofit operations for the hosted datastore.

Handles the bulk read of organization rows.
"""

import logging
from typing import List, Dict, Any

from ..core import constants


class NonprofitsAPI:
    """Mixin for nonprofit-related API operations."""
    logger: logging.Logger

    def get_nonprofits(self, table: str = constants.DEFAULT_TABLE) -> List[Dict[str, Any]]:
        """
        Get every row of the nonprofits table.

        Args:
            table: Table name

        Returns:
            List of flat row objects

        Raises:
            ValueError: If the response body is not a JSON array
        """
        self.logger.info(f"Fetching nonprofits from table '{table}'")
        endpoint = f"{constants.REST_PATH}/{table}"
        result = self.get(endpoint, params={"select": "*"})  # type: ignore

        if not isinstance(result, list):
            raise ValueError(
                f"Unexpected response for table '{table}': expected a list, got {type(result).__name__}"
            )
        return result
