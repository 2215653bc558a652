"""Lessons for the SOLID principles."""
