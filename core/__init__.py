"""
Core shared components for the Bookwise platform.

Provides the exception hierarchy and the API error handler used by every app.
"""

__version__ = "1.0.0"
