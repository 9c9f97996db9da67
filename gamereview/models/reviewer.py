"""
Reviewer table - one row per account.
"""
from sqlalchemy import Column, String, LargeBinary, Index

from gamereview.db.database import Base


class ReviewerRecord(Base):
    """
    Reviewer accounts table.
    Ids are stored as the 16 raw bytes of the UUID.
    """

    __tablename__ = "reviewer"

    # Primary Key
    reviewer_id = Column(LargeBinary(16), primary_key=True)

    # Null once the account is activated
    reviewer_activation_token = Column(String(32), nullable=True)

    reviewer_nick_name = Column(String(32), nullable=False)
    reviewer_email = Column(String(128), nullable=False, unique=True)

    # argon2i hash
    reviewer_hash = Column(String(97), nullable=False)

    __table_args__ = (
        Index("idx_reviewer_nick_name", "reviewer_nick_name"),
        Index("idx_reviewer_activation_token", "reviewer_activation_token"),
    )

    def __repr__(self):
        return f"<ReviewerRecord(nick_name={self.reviewer_nick_name}, email={self.reviewer_email})>"
