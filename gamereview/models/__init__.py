"""
SQLAlchemy models package.
Table definitions for the reviewer and review tables.
"""
from gamereview.models.reviewer import ReviewerRecord
from gamereview.models.review import ReviewRecord

__all__ = [
    "ReviewerRecord",
    "ReviewRecord",
]
