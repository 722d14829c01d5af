"""Tavern groups API."""
