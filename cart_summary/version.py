"""
Application version information.

Version format: MAJOR.MINOR
- MAJOR: Breaking changes (0 for MVP/beta)
- MINOR: Incremented with each merged PR (0.1 → 0.2 → 0.3...)

Version is printed by the summarize_cart CLI with --version.
"""

__version__ = "0.1"
