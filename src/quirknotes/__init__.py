"""
QuirkNotes Backend - Personal Note Taking API

A small authenticated backend for personal text notes.
"""

__version__ = "1.0.0"
