"""
Tests for CategoryChart: configuration, filters and clicks.
"""

import pytest
from unittest.mock import Mock
from chartcap.application.charts import CategoryChart
from chartcap.infrastructure.capping import UNBOUNDED, BucketItem, CapConfig
from chartcap.infrastructure.charts import ChartDataProvider
from chartcap.infrastructure.data.groups import InMemoryGroupSource
from chartcap.infrastructure.filters import KeySetFilter

ITEMS = [
    {'key': 'a', 'value': 10},
    {'key': 'b', 'value': 5},
    {'key': 'c', 'value': 3},
]


@pytest.fixture
def chart():
    return CategoryChart(InMemoryGroupSource(ITEMS), dimension='letter')


class TestCategoryChartConfiguration:
    """Tests for chart-level capping configuration"""

    def test_defaults(self, chart):
        assert isinstance(chart, ChartDataProvider)
        assert chart.cap == UNBOUNDED
        assert chart.take_front is True
        assert chart.others_label == 'Others'
        assert callable(chart.others_grouper)

    def test_properties_round_trip(self, chart):
        chart.cap = 2
        chart.take_front = False
        chart.others_label = 'Rest'
        chart.others_grouper = None

        assert chart.cap == 2
        assert chart.take_front is False
        assert chart.others_label == 'Rest'
        assert chart.others_grouper is None

    def test_configure_cap_chains(self, chart):
        assert chart.configure_cap(cap=1) is chart
        assert chart.cap == 1

    def test_shared_config(self):
        """Test that the chart reads a passed-in config object."""
        config = CapConfig(cap=1)
        chart = CategoryChart(InMemoryGroupSource(ITEMS), config=config)

        config.others_label = 'Other letters'

        assert chart.data()[-1].key == 'Other letters'

    def test_requires_group_source(self):
        with pytest.raises(TypeError, match='group must be a GroupSource'):
            CategoryChart(ITEMS)


class TestCategoryChartFilters:
    """Tests for the chart filter sink"""

    def test_filter_toggles(self, chart):
        chart.filter('a')
        assert chart.filters == ['a']
        assert chart.has_filter('a')

        chart.filter('a')
        assert chart.filters == []
        assert not chart.has_filter()

    def test_filter_all(self, chart):
        chart.filter('a')
        chart.highlighted.add('a')

        chart.filter_all()

        assert chart.filters == []
        assert chart.highlighted == set()


class TestCategoryChartClicks:
    """Tests for clicking rendered items"""

    def test_others_click_filters_then_highlights(self, chart):
        """Test that clicking Others filters by its keys and still highlights."""
        chart.configure_cap(cap=2)
        others = chart.data()[-1]

        chart.on_click(others)

        assert chart.filters == [KeySetFilter(('c',), column='letter')]
        assert chart.highlighted == {'Others'}

    def test_second_others_click_removes_filter(self, chart):
        chart.configure_cap(cap=2)
        others = chart.data()[-1]

        chart.on_click(others)
        chart.on_click(others)

        assert chart.filters == []
        assert chart.highlighted == set()

    def test_raw_click_only_highlights(self, chart):
        chart.on_click(ITEMS[0])

        assert chart.filters == []
        assert chart.highlighted == {'a'}

    def test_extra_handler_runs_before_bridge_and_base(self, chart):
        """Test that handlers installed later run first and keep the others."""
        events = []
        chart.install_click_handler(lambda item: events.append(list(chart.filters)))
        chart.configure_cap(cap=1)

        chart.on_click(chart.data()[-1])

        assert events == [[]]
        assert chart.filters == [KeySetFilter(('b', 'c'), column='letter')]
        assert chart.highlighted == {'Others'}

    def test_filter_errors_propagate(self, chart):
        """Test that a failing filter sink aborts the click."""
        chart.filter = Mock(side_effect=RuntimeError('sink down'))
        chart.configure_cap(cap=1)

        with pytest.raises(RuntimeError, match='sink down'):
            chart.on_click(chart.data()[-1])

        assert chart.highlighted == set()

    def test_bucket_built_by_custom_grouper_is_clickable(self, chart):
        chart.others_grouper = lambda kept, rest: kept + [BucketItem('Misc', 1, ('z',))]
        chart.configure_cap(cap=0)

        chart.on_click(chart.data()[-1])

        assert chart.filters == [KeySetFilter(('z',), column='letter')]
