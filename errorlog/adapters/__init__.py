"""Concrete error log backends."""
