"""
Shared utilities for fixseed: exceptions and logging.
"""
