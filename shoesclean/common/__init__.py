"""
Shared helpers for settings, logging, and schema bootstrap.
"""
