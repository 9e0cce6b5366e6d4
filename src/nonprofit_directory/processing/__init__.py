"""
Data processing module for the nonprofit directory.

Provides filtering, sorting and pagination of organization records.
Raw rows are converted by RecordIngestor, which the record stores own.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..models import FilterCriteria, Organization, PageResult
from .ingestion import RecordIngestor
from .filtering import filter_records, parse_numeric_input
from .sorting import sort_records
from .pagination import PageOutOfRangeError, clamp_page, paginate, total_pages_for


class DirectoryProcessor:
    """
    Unified processor composing Filter -> Sort -> Paginate.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize directory processor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def select(
        self,
        records: Sequence[Organization],
        criteria: FilterCriteria
    ) -> List[Organization]:
        """
        Filter then sort records according to criteria.

        Args:
            records: Full collection
            criteria: Active filter and sort criteria

        Returns:
            Ordered list of matching records
        """
        matched = filter_records(records, criteria)
        ordered = sort_records(matched, criteria.sort)
        self.logger.debug(
            f"Selected {len(ordered)} of {len(records)} records (sort={criteria.sort.value})"
        )
        return ordered

    def run(
        self,
        records: Sequence[Organization],
        criteria: FilterCriteria,
        page_size: int,
        page_number: int
    ) -> Tuple[PageResult, int]:
        """
        Run the full pipeline, clamping the page number to the result.

        Args:
            records: Full collection
            criteria: Active filter and sort criteria
            page_size: Items per page
            page_number: Requested page

        Returns:
            Tuple of (page result, page number actually used)
        """
        ordered = self.select(records, criteria)
        page_number = clamp_page(page_number, total_pages_for(len(ordered), page_size))
        return paginate(ordered, page_size, page_number), page_number


__all__ = [
    "RecordIngestor",
    "DirectoryProcessor",
    "PageOutOfRangeError",
    "clamp_page",
    "filter_records",
    "paginate",
    "parse_numeric_input",
    "sort_records",
    "total_pages_for",
]
