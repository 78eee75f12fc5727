"""
CLI tests using click's CliRunner against the seeded test app.
"""

import pytest
from click.testing import CliRunner

import cli as cli_module


@pytest.fixture
def runner(app, monkeypatch):
    monkeypatch.setattr(cli_module, "get_app_context", lambda: app.app_context())
    return CliRunner()


def test_metrics_lists_registry(runner):
    result = runner.invoke(cli_module.cli, ["metrics"])
    assert result.exit_code == 0
    assert "price_by_area" in result.output
    assert "label_as_unknown" in result.output


def test_show_price_chart(runner, seed):
    result = runner.invoke(cli_module.cli, ["show", "price-by-area"])
    assert result.exit_code == 0
    assert "Downtown" in result.output
    assert "$10.0m" in result.output


def test_show_count_chart(runner, seed):
    result = runner.invoke(cli_module.cli, ["show", "room-types"])
    assert result.exit_code == 0
    assert "1 B/R" in result.output


def test_show_heat_ranking(runner, seed):
    result = runner.invoke(cli_module.cli, ["show", "area-price-popularity"])
    assert result.exit_code == 0
    assert "Marina" in result.output
    assert "4 listings" in result.output


def test_show_json(runner, seed):
    result = runner.invoke(cli_module.cli, ["show", "market-volume", "--json"])
    assert result.exit_code == 0
    assert '"labels"' in result.output


def test_show_rejects_unknown_chart(runner):
    result = runner.invoke(cli_module.cli, ["show", "median-prices"])
    assert result.exit_code != 0
