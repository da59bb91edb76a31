"""Utility helpers shared across roundoff modules."""
