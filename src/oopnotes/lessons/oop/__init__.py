"""Lessons for the four object-oriented principles."""
