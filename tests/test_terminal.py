# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest
from typer.testing import CliRunner
from yaml import safe_dump, safe_load

from calgrid import configuration
from calgrid.terminal.app import app
from calgrid.terminal.completion import complete_group_key

runner = CliRunner()


@pytest.fixture
def workspace(app_paths: Path) -> Path:
    config = configuration.default_configuration()
    config["timezone"] = "UTC"
    configuration.APP_CONFIG_PATH.write_text(safe_dump(dict(config)))
    configuration.DATA_EVENTS_PATH.write_text(
        safe_dump(
            {
                "events": [
                    {
                        "id": "standup",
                        "title": "Standup",
                        "start": "2024-03-04T09:00:00+00:00",
                        "end": "2024-03-04T10:00:00+00:00",
                    },
                    {
                        "id": "review",
                        "title": "Review",
                        "start": "2024-03-04T09:30:00+00:00",
                        "end": "2024-03-04T10:30:00+00:00",
                        "group_key": "team",
                    },
                ]
            }
        )
    )
    return app_paths


def test_day_view_with_details(workspace: Path) -> None:
    result = runner.invoke(app, ["view", "day", "--date", "2024-03-04", "--details"])

    assert result.exit_code == 0, result.output
    assert "Monday, March 4, 2024" in result.output
    assert "standup" in result.output
    assert "1/2" in result.output
    assert "2/2" in result.output


def test_day_view_alias_and_scope(workspace: Path) -> None:
    result = runner.invoke(
        app, ["v", "d", "-d", "2024-03-04", "--scope", "personal_only", "--details"]
    )

    assert result.exit_code == 0, result.output
    assert "standup" in result.output
    assert "review" not in result.output


def test_month_view(workspace: Path) -> None:
    result = runner.invoke(app, ["view", "month", "--date", "2024-03-04"])

    assert result.exit_code == 0, result.output
    assert "March 2024" in result.output


def test_month_view_shift(workspace: Path) -> None:
    result = runner.invoke(app, ["view", "month", "--date", "2024-01-31", "--shift", "1"])

    assert result.exit_code == 0, result.output
    assert "February 2024" in result.output


def test_week_and_year_views(workspace: Path) -> None:
    week = runner.invoke(app, ["view", "week", "--date", "2024-03-06"])
    year = runner.invoke(app, ["view", "year", "--date", "2024-03-06"])

    assert week.exit_code == 0, week.output
    assert "Week 10, 2024" in week.output
    assert year.exit_code == 0, year.output
    assert "2 events" in year.output


def test_invalid_date_is_rejected(workspace: Path) -> None:
    result = runner.invoke(app, ["view", "day", "--date", "2024-02-30"])
    assert result.exit_code == 2


def test_invalid_hour_range_is_rejected(workspace: Path) -> None:
    result = runner.invoke(
        app, ["view", "day", "--date", "2024-03-04", "-sh", "10", "-eh", "9"]
    )
    assert result.exit_code == 2


def test_config_set_and_view(workspace: Path) -> None:
    result = runner.invoke(app, ["config", "set", "--week-start", "Sunday"])

    assert result.exit_code == 0, result.output
    saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert saved["week_start"] == "sunday"
    assert saved["timezone"] == "UTC"

    result = runner.invoke(app, ["config", "view"])
    assert result.exit_code == 0, result.output
    assert "sunday" in result.output


def test_config_set_rejects_unknown_timezone(workspace: Path) -> None:
    result = runner.invoke(app, ["config", "set", "--timezone", "Mars/Olympus"])

    assert result.exit_code == 2
    assert safe_load(configuration.APP_CONFIG_PATH.read_text())["timezone"] == "UTC"


def test_group_keys_complete_from_events_file(workspace: Path) -> None:
    assert complete_group_key("") == ["team"]
    assert complete_group_key("te") == ["team"]
    assert complete_group_key("x") == []


def test_day_view_restricted_to_group(workspace: Path) -> None:
    result = runner.invoke(
        app,
        ["view", "day", "-d", "2024-03-04", "--scope", "groups_only", "-g", "team", "--details"],
    )

    assert result.exit_code == 0, result.output
    assert "review" in result.output
    assert "standup" not in result.output
