"""SQLAlchemy model for the departments table."""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from orgadmin.infrastructure.persistence.database import Base


class DepartmentModel(Base):
    """SQLAlchemy model for the departments table.

    Attributes:
        id: Primary key (UUID string).
        name: Department name, unique across all departments.
        description: Optional description.
        created_at: Timestamp when the department was created.
        updated_at: Timestamp when the department was last updated.
    """

    __tablename__ = "departments"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Department ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Department name",
    )
    description: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Description of the department",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (UniqueConstraint("name", name="uq_departments_name"),)

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name={self.name})>"
