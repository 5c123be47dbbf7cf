"""Calculation services."""
