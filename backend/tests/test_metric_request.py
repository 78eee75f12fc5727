"""
Tests for MetricRequest invariants and the metric registry.
"""

import pytest

from services.metrics import (
    METRIC_ORDER,
    METRIC_REGISTRY,
    InvalidMetricRequest,
    MetricRequest,
    MissingCategoryPolicy,
    QueryFailure,
    get_metric,
    list_metrics,
)


class TestMetricRequestInvariants:

    def test_requires_grouping_column(self):
        with pytest.raises(InvalidMetricRequest):
            MetricRequest(metric="m", grouping_columns=())

    def test_at_most_two_grouping_columns(self):
        with pytest.raises(InvalidMetricRequest, match="at most 2"):
            MetricRequest(
                metric="m",
                grouping_columns=("area_name_en", "property_type_en", "rooms_en"),
            )

    def test_grouping_column_allow_list(self):
        with pytest.raises(InvalidMetricRequest, match="not groupable"):
            MetricRequest(metric="m", grouping_columns=("area_name_en; DROP TABLE real_estate",))

    def test_value_column_allow_list(self):
        with pytest.raises(InvalidMetricRequest, match="cannot be averaged"):
            MetricRequest(metric="m", grouping_columns=("area_name_en",), value_column="rooms_en")

    def test_filter_column_allow_list(self):
        with pytest.raises(InvalidMetricRequest, match="cannot be filtered"):
            MetricRequest(metric="m", grouping_columns=("area_name_en",), filter_column="actual_worth")

    @pytest.mark.parametrize("limit", [0, -1, True, 2.5])
    def test_limit_must_be_positive_int(self, limit):
        with pytest.raises(InvalidMetricRequest, match="limit"):
            MetricRequest(metric="m", grouping_columns=("area_name_en",), limit=limit)

    def test_value_flags_need_value_column(self):
        with pytest.raises(InvalidMetricRequest):
            MetricRequest(metric="m", grouping_columns=("area_name_en",), positive_values_only=True)

    def test_with_changes_revalidates(self):
        request = get_metric("price_by_area")
        assert request.with_changes(limit=5).limit == 5
        with pytest.raises(InvalidMetricRequest):
            request.with_changes(limit=0)

    def test_outer_keys_stored_as_tuple(self):
        request = get_metric("top_areas_property_types").with_changes(outer_keys=["A", "B"])
        assert request.outer_keys == ("A", "B")

    def test_has_date_key(self):
        assert get_metric("price_trends_monthly").has_date_key
        assert not get_metric("room_types").has_date_key


class TestRegistry:

    def test_every_metric_registered_once(self):
        assert len(METRIC_ORDER) == len(set(METRIC_ORDER))
        assert set(METRIC_ORDER) == set(METRIC_REGISTRY)
        assert [m.metric for m in list_metrics()] == METRIC_ORDER

    def test_unknown_metric(self):
        with pytest.raises(KeyError):
            get_metric("no_such_metric")

    def test_missing_category_policies(self):
        assert get_metric("room_types").on_missing_category == MissingCategoryPolicy.EXCLUDE
        assert get_metric("top_areas_ranking").on_missing_category == MissingCategoryPolicy.EXCLUDE
        assert (
            get_metric("property_type_distribution").on_missing_category
            == MissingCategoryPolicy.LABEL_AS_UNKNOWN
        )
        assert (
            get_metric("area_price_popularity").on_missing_category
            == MissingCategoryPolicy.LABEL_AS_UNKNOWN
        )


def test_query_failure_message_hides_cause():
    err = QueryFailure("room_types", RuntimeError("password=secret"))
    assert str(err) == "Query failed for metric 'room_types'"
    assert "secret" not in str(err)
    assert isinstance(err.cause, RuntimeError)
