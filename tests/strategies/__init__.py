"""Hypothesis strategies for localekit property-based testing."""
