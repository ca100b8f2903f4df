"""
Tests for the capped chart workflow.
"""

import pytest
import pandas as pd
from unittest.mock import Mock
from chartcap.application.workflows import CappedChartWorkflow, presentation_frame
from chartcap.infrastructure.capping import BucketItem, CapConfig
from chartcap.infrastructure.data.readers import DataFrameDataReader, DataReader


@pytest.fixture
def sales_df():
    return pd.DataFrame({
        'country': ['TR', 'DE', 'TR', 'FR', 'DE', 'US', 'NL'],
        'revenue': [100, 40, 50, 20, 10, 5, 5],
    })


class TestPresentationFrame:
    """Tests for presentation_frame()"""

    def test_rows_for_raw_and_bucket_items(self):
        items = [{'key': 'a', 'value': 10}, BucketItem('Others', 3, ('c',))]

        frame = presentation_frame(
            items,
            key_accessor=lambda item, i: item.key if isinstance(item, BucketItem) else item['key'],
            value_accessor=lambda item, i: item.value if isinstance(item, BucketItem) else item['value'],
        )

        assert list(frame.columns) == ['key', 'value', 'others']
        assert frame['key'].tolist() == ['a', 'Others']
        assert frame['value'].tolist() == [10, 3]
        assert frame['others'].tolist() == [None, ('c',)]

    def test_empty(self):
        frame = presentation_frame([], Mock(), Mock())

        assert frame.empty
        assert list(frame.columns) == ['key', 'value', 'others']


class TestCappedChartWorkflow:
    """Tests for CappedChartWorkflow"""

    def make_workflow(self, df, **config):
        return CappedChartWorkflow(
            data_reader=DataFrameDataReader(df),
            dimension='country',
            value='revenue',
            config=CapConfig(**config)
        )

    def test_run_caps_groups(self, sales_df):
        workflow = self.make_workflow(sales_df, cap=2)

        frame = workflow.run()

        assert frame['key'].tolist() == ['TR', 'DE', 'Others']
        assert frame['value'].tolist() == [150, 50, 30]
        assert frame['others'].iloc[-1] == ('FR', 'US', 'NL')

    def test_run_conserves_total(self, sales_df):
        workflow = self.make_workflow(sales_df, cap=1)

        frame = workflow.run()

        assert frame['value'].sum() == sales_df['revenue'].sum()

    def test_run_unbounded(self, sales_df):
        frame = self.make_workflow(sales_df).run()

        assert frame['key'].tolist() == ['TR', 'DE', 'FR', 'US', 'NL']
        assert frame['others'].isna().all()

    def test_drill_down_into_others(self, sales_df):
        """Test that clicking Others resolves back to the absorbed records."""
        workflow = self.make_workflow(sales_df, cap=2)
        workflow.run()

        workflow.click('Others')
        records = workflow.drill_down()

        assert sorted(records['country'].unique()) == ['FR', 'NL', 'US']
        assert records['revenue'].sum() == 30

    def test_drill_down_without_filters_returns_all(self, sales_df):
        workflow = self.make_workflow(sales_df, cap=2)
        workflow.run()

        assert len(workflow.drill_down()) == len(sales_df)

    def test_drill_down_combines_filters(self, sales_df):
        """Test that chart filters are alternatives."""
        workflow = self.make_workflow(sales_df, cap=2)
        workflow.run()
        workflow.click('Others')
        workflow.chart.filter('TR')

        records = workflow.drill_down()

        assert sorted(records['country'].unique()) == ['FR', 'NL', 'TR', 'US']

    def test_chart_state_survives_rerun(self, sales_df):
        workflow = self.make_workflow(sales_df, cap=2)
        workflow.run()
        chart = workflow.chart
        workflow.click('Others')

        workflow.run()

        assert workflow.chart is chart
        assert len(chart.filters) == 1

    def test_click_unknown_key(self, sales_df):
        workflow = self.make_workflow(sales_df, cap=2)
        workflow.run()

        with pytest.raises(KeyError, match='No chart element'):
            workflow.click('XX')

    def test_chart_before_run(self, sales_df):
        workflow = self.make_workflow(sales_df)

        with pytest.raises(RuntimeError, match='has not been run yet'):
            workflow.chart

    def test_empty_records(self):
        reader = Mock(spec=DataReader)
        reader.load.return_value = pd.DataFrame()
        workflow = CappedChartWorkflow(reader, dimension='country', value='revenue')

        with pytest.raises(ValueError, match='empty dataset'):
            workflow.run()

        reader.load.assert_called_once()

    def test_validation(self, sales_df):
        with pytest.raises(TypeError, match='data_reader must be a DataReader'):
            CappedChartWorkflow(sales_df, dimension='country', value='revenue')

        with pytest.raises(ValueError, match='dimension is required'):
            CappedChartWorkflow(DataFrameDataReader(sales_df), dimension='', value='revenue')
