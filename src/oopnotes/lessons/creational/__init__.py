"""Lessons for the creational design patterns."""
