"""
Example: top-3 countries by revenue with an "Others" slice, then drill into it.
"""

import pandas as pd
import chartcap
from chartcap.application.workflows import CappedChartWorkflow
from chartcap.infrastructure.capping import is_unbounded
from chartcap.infrastructure.data.readers import DataFrameDataReader

chartcap.configure()

sales = pd.DataFrame({
    'country': ['TR', 'DE', 'FR', 'US', 'NL', 'TR', 'DE', 'ES', 'IT'],
    'revenue': [120, 80, 30, 25, 10, 60, 15, 8, 4],
})

# Optional: CHARTCAP_CAP / CHARTCAP_OTHERS_LABEL from a .env file
config = chartcap.load_cap_config()
if is_unbounded(config.cap):
    config.cap = 3

workflow = CappedChartWorkflow(
    data_reader=DataFrameDataReader(sales),
    dimension='country',
    value='revenue',
    config=config,
)

print(workflow.run())

# A click on the "Others" slice filters the chart by the countries it absorbed
workflow.click(config.others_label)
print(workflow.chart.filters)
print(workflow.drill_down())
