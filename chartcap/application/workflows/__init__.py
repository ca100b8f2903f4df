"""
Workflow orchestrators.
"""

from .capped_chart_workflow import CappedChartWorkflow, presentation_frame

__all__ = ["CappedChartWorkflow", "presentation_frame"]
