"""
Tag SQLAlchemy model.
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tag_api.db.base import Base

TAG_NAME_COLUMN_LENGTH = 45

# Signed 64-bit range of the id column
MIN_TAG_ID = 1
MAX_TAG_ID = 2**63 - 1


class Tag(Base):
    """Tag entity model."""
    __tablename__ = "tags"

    # SQLite only autoincrements an INTEGER PRIMARY KEY, which is 64-bit there
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Tag identifier assigned on insert",
    )
    name: Mapped[str] = mapped_column(
        String(TAG_NAME_COLUMN_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Tag name (unique)",
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"
