"""
Gated Caves Version Information

This file contains the single source of truth for the version number.
All version references throughout the codebase should import from this file.
"""

# Version number (semantic versioning)
__version__ = "0.3.0"

# Display name for the command line banner
__version_display__ = f"v{__version__}"
