"""Furniture catalog API."""
