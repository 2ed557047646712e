"""
Adaptive Style Profile Engine.

Turns questionnaire answers into a confidence-scored style profile, matches it
against reference archetypes, explains it to the designer and compares it with
past clients and industry aggregates.
"""

from style_engine.core.version import __version__

__all__ = ["__version__"]
