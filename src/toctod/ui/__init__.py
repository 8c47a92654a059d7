"""User-facing components for the TOC/TOD calculator.

This module provides the form controller and the text rendering of results.
"""

from toctod.ui.controller import ProfileController
from toctod.ui.display import DisplayResult, format_profile, sanitize_value

__all__ = ["DisplayResult", "ProfileController", "format_profile", "sanitize_value"]
