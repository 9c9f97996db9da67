"""
Game review data layer.

Validated Reviewer and Review entities plus single-statement SQL repositories.
"""

__version__ = "0.1.0"
