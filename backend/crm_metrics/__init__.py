"""Metrics aggregation and trend classification for the CRM sales dashboard."""

__version__ = "0.1.0"
