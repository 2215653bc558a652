"""Runnable lessons, one self-contained module per topic.

Each module exposes the toy classes it teaches and a ``demo()`` function
whose printed output is documented in the matching note.
"""
