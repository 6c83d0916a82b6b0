"""
Translate text from the command line with Google Translate.
"""

from __future__ import annotations

__version__ = "0.1.0"
