"""SQLAlchemy models for expensetrack database."""

from sqlalchemy import Column, Integer, String, Numeric, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False)
    note = Column(String, nullable=True)
    # Kept as text: the date is stored as entered and parsed when filtering
    date = Column(String, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
