"""
Application layer: chart hosts and workflows.
"""
