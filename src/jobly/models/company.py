"""Company database model."""

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from jobly.database import Base


class Company(Base):
    """
    Company model representing employers that post jobs.

    Attributes:
        handle: Primary key, URL-friendly identifier (immutable)
        name: Company name (unique)
        num_employees: Head count, never negative
        description: Free-text description
        logo_url: Optional logo URL
    """

    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    num_employees = Column(Integer, CheckConstraint("num_employees >= 0"), nullable=True)
    description = Column(Text, nullable=False)
    logo_url = Column(Text, nullable=True)

    def __repr__(self) -> str:
        """String representation of Company."""
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
