"""
Bookwise algorithms package.

Pure scheduling computations used by the booking apps. Nothing in here talks
to the database; callers fetch rows and pass them in.

Subpackages:
- availability: Slot generation, conflict detection and capacity aggregation
"""

__version__ = "1.0.0"
