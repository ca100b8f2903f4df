"""
Record readers and group sources.
"""
