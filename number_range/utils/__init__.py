"""Utility functions for number ranges."""
