# app/database/database.py
"""
SQLAlchemy database setup and models.
"""

import os
from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app/database/tracker.db")

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


class User(Base):
    """User model with authentication data."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    work_sessions = relationship("WorkSession", back_populates="user", cascade="all, delete-orphan")
    holidays = relationship("Holiday", back_populates="user", cascade="all, delete-orphan")


class WorkSession(Base):
    """
    One worked shift.

    Earnings columns are computed once when the session is added, using the
    month's overtime as it stood at that moment. They are never recomputed
    when other sessions in the same month are added or deleted later.
    """

    __tablename__ = "work_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(BigInteger, nullable=False, index=True)  # epoch ms, local midnight
    start_time = Column(String(5), nullable=False)  # "HH:MM"
    end_time = Column(String(5), nullable=False)
    break_minutes = Column(Integer, nullable=False, default=0)
    hourly_rate = Column(Float, nullable=False)
    description = Column(String(500), nullable=False, default="")
    is_holiday = Column(Boolean, nullable=False, default=False)

    hours_worked = Column(Float, nullable=False)
    total_earnings = Column(Float, nullable=False)
    regular_hours = Column(Float)
    overtime_hours = Column(Float)
    regular_earnings = Column(Float)
    overtime_earnings = Column(Float)
    holiday_earnings = Column(Float)

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="work_sessions")

    def __repr__(self):
        return (
            f"<WorkSession(id={self.id}, user_id={self.user_id}, date={self.date}, "
            f"hours={self.hours_worked}, holiday={self.is_holiday})>"
        )


class Holiday(Base):
    """Named calendar marker, at most one per user and date."""

    __tablename__ = "holidays"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_holiday_user_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(BigInteger, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False, default="")

    user = relationship("User", back_populates="holidays")

    def __repr__(self):
        return f"<Holiday(id={self.id}, user_id={self.user_id}, date={self.date}, name={self.name!r})>"


class Transaction(Base):
    """Income or expense entry."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    description = Column(String(500), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    type = Column(String(10), nullable=False)  # "income" | "expense"
    date = Column(BigInteger, nullable=False, index=True)

    def __repr__(self):
        return f"<Transaction(id={self.id}, user_id={self.user_id}, {self.type} {self.amount})>"


class Category(Base):
    """User-defined transaction category."""

    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("user_id", "name", "type", name="uq_category_user_name_type"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    type = Column(String(10), nullable=False)
    color = Column(String(20), nullable=False)


def create_tables():
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
