"""
flagmask Version Information

This file contains the single source of truth for the flagmask version number.
All version references throughout the codebase should import from this file.
"""

# Version number (semantic versioning)
__version__ = "1.0.0"
