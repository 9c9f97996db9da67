"""
Review table - stores game reviews.
"""
from sqlalchemy import (
    Column,
    String,
    Text,
    SmallInteger,
    DateTime,
    LargeBinary,
    ForeignKey,
    Index,
)

from gamereview.db.database import Base


class ReviewRecord(Base):
    """
    Reviews table.
    Each review belongs to one reviewer; deleting a reviewer does not touch its reviews.
    """

    __tablename__ = "review"

    # Primary Key
    review_id = Column(LargeBinary(16), primary_key=True)

    # Foreign Key to Reviewer
    review_reviewer_id = Column(
        LargeBinary(16), ForeignKey("reviewer.reviewer_id"), nullable=False
    )

    review_console = Column(String(16), nullable=False)
    review_date = Column(DateTime, nullable=False)
    review_rating = Column(SmallInteger, nullable=False)  # 0-10
    review_content = Column(Text, nullable=False)

    # Indexes for common queries
    __table_args__ = (
        Index("idx_review_reviewer_id", "review_reviewer_id"),
        Index("idx_review_console", "review_console"),
        Index("idx_review_rating", "review_rating"),
        Index("idx_review_date", "review_date"),
    )

    def __repr__(self):
        return f"<ReviewRecord(console={self.review_console}, rating={self.review_rating})>"
