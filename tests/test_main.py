"""
Tests for the command line front end.
"""

import sys

import pytest

from src.nonprofit_directory.main import DirectoryApp, main, render_card, render_pagination
from src.nonprofit_directory.models import FilterCriteria, Organization, SortCriterion
from src.nonprofit_directory.services import LoadState


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    """Send log files to a temporary directory."""
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "directory.log"))


@pytest.fixture
def app(nonprofits_file):
    """App reading the fixture export."""
    app = DirectoryApp(data_file=str(nonprofits_file))
    app.load()
    return app


class TestRendering:
    """Test text rendering helpers."""

    def test_card_with_all_facts(self):
        org = Organization(
            id=1,
            name="Bay Area Food Bank",
            focus_areas=("Food Security", "Health"),
            location="Oakland",
            budget=250000.0,
            staff_count=12,
            year_founded=1998,
        )
        card = render_card(org)
        assert "Bay Area Food Bank  [1]" in card
        assert "Food Security, Health" in card
        assert "budget $250,000 | 12 staff | founded 1998" in card

    def test_card_skips_unknowns(self):
        card = render_card(Organization(id=2, name="Quiet Org"))
        assert card == "Quiet Org  [2]"

    def test_pagination(self):
        assert render_pagination(1, 3) == "  Page 1 of 3 >"
        assert render_pagination(3, 3) == "< Page 3 of 3  "
        assert render_pagination(1, 0) == ""


class TestDirectoryApp:
    """Test the application wiring."""

    def test_load_from_file(self, app):
        assert app.controller.load_state == LoadState.READY
        assert app.controller.total_filtered_count == 8

    def test_apply_and_render(self, app):
        app.apply(
            FilterCriteria(location="San Francisco", sort=SortCriterion.BUDGET_DESC),
            page_size=6,
            page=1,
        )
        output = app.render()

        assert output.startswith("Nonprofit Organizations (3)")
        assert "Filters: Location: San Francisco" in output
        assert output.index("Coastal Arts Collective") < output.index("Mission Housing Partners")
        assert "Page 1 of 1" in output

    def test_render_empty_state(self, app):
        app.apply(FilterCriteria(search_term="zzz"))
        output = app.render()
        assert "No nonprofits found." in output

    def test_missing_data_file_shows_empty_directory(self, tmp_path):
        app = DirectoryApp(data_file=str(tmp_path / "missing.json"))
        assert app.load() == LoadState.FAILED
        assert "No nonprofits found." in app.render()

    def test_config_required_without_data_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CONFIG_FILE", str(tmp_path / "absent.json"))
        with pytest.raises(FileNotFoundError):
            DirectoryApp()


class TestMain:
    """Test the argparse entry point."""

    def test_main_prints_page(self, nonprofits_file, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "nonprofit-directory",
            "--data", str(nonprofits_file),
            "--focus-area", "Health",
            "--sort", "name_desc",
        ])

        main()

        out = capsys.readouterr().out
        assert "Nonprofit Organizations (2)" in out
        assert out.index("Harbor Health Clinic") < out.index("Bay Area Food Bank")

    def test_main_bad_sort_exits(self, nonprofits_file, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "nonprofit-directory", "--data", str(nonprofits_file), "--sort", "random",
        ])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Application failed" in capsys.readouterr().out
