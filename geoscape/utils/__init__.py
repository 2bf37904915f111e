"""Utility helpers for geoscape."""
