"""
Infrastructure: accessors, capping, filters, data sources and click handling.
"""
