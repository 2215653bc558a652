"""oopnotes: OOP, SOLID and creational-pattern study notes with runnable lessons."""

__version__ = "0.1.0"
