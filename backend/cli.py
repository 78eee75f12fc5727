#!/usr/bin/env python3
"""
CLI for Chart Analytics

Commands:
    metrics  - List the registered metric definitions
    show     - Run one chart against the configured database and print it

Usage:
    python cli.py metrics
    python cli.py show price-by-area --usage Residential
    python cli.py show price-trends --period monthly
    python cli.py show market-volume --range 10
"""

import json
import sys

import click

from constants import TREND_PERIODS, YEAR_RANGE_PRESETS
from utils.normalize import to_str
from utils.presentation import format_number, format_price


def get_app_context():
    """Get Flask app context for database access."""
    from app import create_app
    app = create_app()
    return app.app_context()


CHART_NAMES = [
    "property-usage",
    "price-by-area",
    "price-trends",
    "price-by-property-type",
    "market-volume",
    "property-usage-distribution",
    "property-type-distribution",
    "top-areas-property-type-distribution",
    "area-price-popularity",
    "room-types",
]

PRICE_CHARTS = {"price-by-area", "price-trends", "price-by-property-type"}


def _load_chart(name, usage=None, period="yearly", year_range=None):
    from services import chart_service

    producers = {
        "property-usage": chart_service.get_property_usages,
        "price-by-area": lambda: chart_service.get_price_by_area(property_usage=usage),
        "price-trends": lambda: chart_service.get_price_trends(period=period),
        "price-by-property-type": chart_service.get_price_by_property_type,
        "market-volume": lambda: chart_service.get_market_volume(range_preset=year_range),
        "property-usage-distribution": chart_service.get_property_usage_distribution,
        "property-type-distribution": chart_service.get_property_type_distribution,
        "top-areas-property-type-distribution": chart_service.get_top_areas_property_type_distribution,
        "area-price-popularity": chart_service.get_area_price_popularity,
        "room-types": chart_service.get_room_types,
    }
    return producers[name]()


def _echo_row(label, value):
    click.echo(click.style(f"  {label:<40}", fg="white") + click.style(value, fg="green"))


def _echo_chart(name, payload):
    if isinstance(payload, list):
        for value in payload:
            click.echo(f"  {value}")
        return

    if "datasets" in payload:
        # Pivot charts: one line per label with its total across series
        for index, label in enumerate(payload["labels"]):
            total = sum(dataset["data"][index] for dataset in payload["datasets"])
            _echo_row(label, format_number(total))
        click.echo()
        click.echo(f"  Series: {', '.join(d['label'] for d in payload['datasets'])}")
        return

    if "areas" in payload:
        for point in payload["data"]:
            _echo_row(
                point["area"],
                f"{format_price(point['avgPrice'])}  ({format_number(point['totalListings'])} listings)",
            )
        return

    formatter = format_price if name in PRICE_CHARTS else format_number
    for label, value in zip(payload["labels"], payload["data"]):
        _echo_row(label, formatter(value))


@click.group()
@click.version_option(version="1.0.0", prog_name="analytics-cli")
def cli():
    """Chart Analytics CLI - inspect metrics and chart payloads."""
    pass


@cli.command("metrics")
def metrics():
    """List registered metrics with their grouping and ordering."""
    from services.metrics import list_metrics

    for request in list_metrics():
        click.secho(request.metric, fg="cyan", bold=True)
        click.echo(f"  group by:  {', '.join(request.grouping_columns)}")
        if request.value_column:
            click.echo(f"  average:   {request.value_column}")
        click.echo(f"  missing:   {request.on_missing_category.value}")
        click.echo(f"  order by:  {request.order_by.value}")


@cli.command("show")
@click.argument("chart", type=click.Choice(CHART_NAMES))
@click.option("--usage", default=None, help="Property usage filter (price-by-area)")
@click.option("--period", type=click.Choice(list(TREND_PERIODS)), default="yearly")
@click.option("--range", "year_range", type=click.Choice(list(YEAR_RANGE_PRESETS)), default=None)
@click.option("--json", "output_json", is_flag=True, help="Output the raw JSON payload")
def show(chart, usage, period, year_range, output_json):
    """
    Run a chart and print its data.

    CHART: Chart endpoint name (e.g. price-by-area)
    """
    from services.metrics import QueryFailure

    with get_app_context():
        try:
            payload = _load_chart(chart, usage=to_str(usage), period=period, year_range=year_range)
        except QueryFailure as e:
            click.secho(f"Error: {e}", fg="red")
            sys.exit(1)

    if output_json:
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo("=" * 60)
    click.secho(chart.upper(), fg="cyan", bold=True)
    click.echo("=" * 60)
    _echo_chart(chart, payload)


if __name__ == "__main__":
    cli()
