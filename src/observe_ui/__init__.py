"""Playwright page objects for OpenObserve UI tests."""

__version__ = "0.1.0"
