"""
Data models for the nonprofit directory.

Contains DTOs for organizations, filter criteria and page results.
"""

from .organization import ImageRef, Organization
from .criteria import (
    ActiveFilter,
    DEFAULT_SORT,
    FilterCriteria,
    NumericInput,
    PageResult,
    SortCriterion,
)

__all__ = [
    "ImageRef",
    "Organization",
    "ActiveFilter",
    "DEFAULT_SORT",
    "FilterCriteria",
    "NumericInput",
    "PageResult",
    "SortCriterion",
]
