"""Job database model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text

from jobly.database import Base


class Job(Base):
    """
    Job model representing a single opening at a company.

    Attributes:
        id: Primary key (store-assigned)
        title: Job title
        salary: Yearly salary, never negative
        equity: Equity fraction in [0, 1]; NULL means unspecified, 0 means none
        company_handle: Foreign key to companies table (immutable)
    """

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, CheckConstraint("salary >= 0"), nullable=True)
    equity = Column(Numeric(asdecimal=False), CheckConstraint("equity <= 1.0"), nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
