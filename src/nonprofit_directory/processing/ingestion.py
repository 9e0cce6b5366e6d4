"""
Record ingestion module.

Converts flat datastore rows into Organization records.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.date_utils import DateUtils
from ..models import ImageRef, Organization


# Canonical attribute -> accepted source column names, in priority order
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id": ("id",),
    "name": ("name",),
    "focus_areas": ("focus_areas", "focusAreas"),
    "location": ("location",),
    "budget": ("budget", "annual_budget"),
    "staff_count": ("staff_count", "staffCount"),
    "year_founded": ("year_founded", "yearFounded"),
    "impact_metric": ("impact_metric", "impactMetric"),
    "image_url": ("image_url", "imageUrl"),
    "image_alt": ("image_alt", "imageAlt"),
    "description": ("description",),
    "website": ("website",),
    "created_at": ("created_at", "createdAt"),
}


def _pick(row: Dict[str, Any], field: str) -> Any:
    for name in FIELD_ALIASES[field]:
        if name in row:
            return row[name]
    return None


def _to_float(x: Any) -> Optional[float]:
    """Convert a value to float, returning None if missing/invalid."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, str):
        x = x.strip().replace(",", "").lstrip("$")
        if not x:
            return None
    try:
        value = float(x)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _to_int(x: Any) -> Optional[int]:
    """Convert a value to int, returning None if missing/invalid."""
    value = _to_float(x)
    return int(value) if value is not None else None


def _to_str(x: Any) -> Optional[str]:
    if x is None:
        return None
    text = str(x).strip()
    return text or None


def _to_tags(x: Any) -> Tuple[str, ...]:
    if x is None:
        return ()
    if isinstance(x, str):
        items: Iterable[Any] = x.split(",")
    elif isinstance(x, (list, tuple, set)):
        items = x
    else:
        return ()
    return tuple(t for t in (str(i).strip() for i in items if i is not None) if t)


class RecordIngestor:
    """Map datastore rows to canonical Organization records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize record ingestor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def ingest_row(self, row: Dict[str, Any]) -> Organization:
        """
        Convert one flat row into an Organization.

        Args:
            row: Row as returned by the datastore

        Returns:
            Organization record

        Raises:
            ValueError: If the row has no identifier
        """
        record_id = _pick(row, "id")
        if record_id is None or (isinstance(record_id, str) and not record_id.strip()):
            raise ValueError("Row has no id")

        image_url = _to_str(_pick(row, "image_url"))
        name = _to_str(_pick(row, "name")) or ""
        image = None
        if image_url:
            image = ImageRef(url=image_url, alt=_to_str(_pick(row, "image_alt")) or name)

        return Organization(
            id=record_id,
            name=name,
            focus_areas=_to_tags(_pick(row, "focus_areas")),
            location=_to_str(_pick(row, "location")) or "",
            budget=_to_float(_pick(row, "budget")),
            staff_count=_to_int(_pick(row, "staff_count")),
            year_founded=_to_int(_pick(row, "year_founded")),
            impact_metric=_to_str(_pick(row, "impact_metric")),
            image=image,
            description=_to_str(_pick(row, "description")),
            website=_to_str(_pick(row, "website")),
            created_at=DateUtils.parse_timestamp(_pick(row, "created_at")),
        )

    def ingest(self, rows: Iterable[Any]) -> List[Organization]:
        """
        Convert datastore rows into records, skipping malformed rows.

        Rows that are not objects, lack an id, or repeat an id already
        seen are dropped with a warning.

        Args:
            rows: Raw rows

        Returns:
            List of Organization records in source order
        """
        records: List[Organization] = []
        seen = set()
        skipped = 0

        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                self.logger.warning(f"Skipping row {index}: expected object, got {type(row).__name__}")
                skipped += 1
                continue
            try:
                record = self.ingest_row(row)
            except ValueError as e:
                self.logger.warning(f"Skipping row {index}: {e}")
                skipped += 1
                continue
            if record.id in seen:
                self.logger.warning(f"Skipping row {index}: duplicate id {record.id!r}")
                skipped += 1
                continue
            seen.add(record.id)
            records.append(record)

        self.logger.debug(f"Ingested {len(records)} records ({skipped} skipped)")
        return records
