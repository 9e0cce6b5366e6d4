"""
Main entry point for the nonprofit directory.

Loads the directory once, applies the requested filters and prints one page
of organization cards.
"""

import sys
from typing import List, Optional

from .core import Config, DateUtils, setup_logger, constants
from .api import DatastoreAPI
from .models import FilterCriteria, Organization, SortCriterion
from .services import (
    FilterStateController,
    JsonFileStore,
    LoadState,
    SupabaseRecordStore,
)


def render_card(org: Organization) -> str:
    """Render one organization as a plain-text card."""
    lines = [f"{org.name}  [{org.id}]"]
    if org.location:
        lines.append(f"  Location:    {org.location}")
    if org.focus_areas:
        lines.append(f"  Focus areas: {', '.join(org.focus_areas)}")
    facts = []
    if org.budget is not None:
        facts.append(f"budget ${int(org.budget):,}")
    if org.staff_count is not None:
        facts.append(f"{org.staff_count} staff")
    if org.year_founded is not None:
        facts.append(f"founded {org.year_founded}")
    if facts:
        lines.append(f"  {' | '.join(facts)}")
    if org.impact_metric:
        lines.append(f"  Impact:      {org.impact_metric}")
    if org.description:
        lines.append(f"  {org.description}")
    return "\n".join(lines)


def render_pagination(current_page: int, total_pages: int) -> str:
    """Render the pagination controls as text."""
    if total_pages == 0:
        return ""
    prev_mark = "<" if current_page > 1 else " "
    next_mark = ">" if current_page < total_pages else " "
    return f"{prev_mark} Page {current_page} of {total_pages} {next_mark}"


class DirectoryApp:
    """Command line browsing session for the nonprofit directory."""

    def __init__(self, config_file: Optional[str] = None, data_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            data_file: Local JSON export to read instead of the datastore
        """
        self.data_file = data_file
        self.config: Optional[Config] = None
        if data_file is None:
            self.config = Config(config_file)

        self.logger = setup_logger(self.config)
        self.logger.info("Nonprofit Directory")
        if self.config:
            self.logger.info(f"Configuration: {self.config}")

        page_size = self.config.default_page_size if self.config else constants.DEFAULT_PAGE_SIZE
        self.controller = FilterStateController(page_size=page_size, logger=self.logger)
        self.api_client: Optional[DatastoreAPI] = None

    def load(self) -> LoadState:
        """Read the collection from the datastore or the local file."""
        try:
            if self.data_file is not None:
                store = JsonFileStore(self.data_file, logger=self.logger)
            else:
                self.api_client = DatastoreAPI(
                    base_url=self.config.datastore_url,
                    api_key=self.config.datastore_anon_key,
                    timeout=self.config.datastore_timeout,
                    max_retries=self.config.datastore_max_retries,
                    verify_ssl=self.config.datastore_verify_ssl,
                    logger=self.logger
                )
                store = SupabaseRecordStore(
                    self.api_client,
                    table=self.config.datastore_table,
                    logger=self.logger
                )
            return self.controller.load(store)
        finally:
            if self.api_client:
                self.api_client.close()

    def apply(self, criteria: FilterCriteria, page_size: Optional[int] = None, page: int = 1) -> None:
        """Push command line selections into the controller."""
        for key in FilterCriteria.filter_keys():
            value = getattr(criteria, key)
            if value not in ("", None):
                self.controller.set_filter(key, value)
        self.controller.set_sort(criteria.sort)
        if page_size is not None:
            self.controller.set_page_size(page_size)
        self.controller.go_to_page(page)

    def render(self) -> str:
        """Render the current page as text."""
        view = self.controller.view()
        out: List[str] = [f"Nonprofit Organizations ({view.total_filtered_count})"]

        if self.controller.loaded_at is not None:
            timezone = self.config.timezone if self.config else constants.DEFAULT_TIMEZONE
            out.append(f"Loaded {DateUtils.format_local(self.controller.loaded_at, timezone)}")

        if view.active_filters:
            out.append("Filters: " + "; ".join(chip.label for chip in view.active_filters))

        if view.page_items:
            out.append("")
            out.extend(render_card(org) + "\n" for org in view.page_items)
            out.append(render_pagination(view.current_page, view.total_pages))
        else:
            out.append("")
            out.append("No nonprofits found.")
            out.append("Try adjusting your search or filter criteria.")

        return "\n".join(out)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Explore nonprofit organizations"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to configuration file")
    parser.add_argument("--data", type=str, default=None, help="Read rows from a local JSON file")
    parser.add_argument("--search", type=str, default="", help="Search name, description and focus areas")
    parser.add_argument("--location", type=str, default="", help="Exact location")
    parser.add_argument("--focus-area", type=str, default="", help="Focus-area tag")
    parser.add_argument("--min-budget", type=str, default="", help="Minimum annual budget")
    parser.add_argument("--max-budget", type=str, default="", help="Maximum annual budget")
    parser.add_argument("--min-staff", type=str, default="", help="Minimum staff count")
    parser.add_argument("--max-staff", type=str, default="", help="Maximum staff count")
    parser.add_argument(
        "--sort",
        type=str,
        default=FilterCriteria().sort.value,
        help="Sort key (name_asc, name_desc, budget_asc, budget_desc, staff_asc, "
             "staff_desc, year_founded_asc, year_founded_desc)"
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        choices=constants.PAGE_SIZE_OPTIONS,
        help="Nonprofits per page"
    )
    parser.add_argument("--page", type=int, default=1, help="Page number")

    args = parser.parse_args()

    try:
        app = DirectoryApp(config_file=args.config, data_file=args.data)
        app.load()
        criteria = FilterCriteria(
            search_term=args.search,
            location=args.location,
            focus_area=args.focus_area,
            min_budget=args.min_budget,
            max_budget=args.max_budget,
            min_staff=args.min_staff,
            max_staff=args.max_staff,
            sort=SortCriterion.parse(args.sort),
        )
        app.apply(criteria, page_size=args.page_size, page=args.page)
        print(app.render())
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
