"""SQLAlchemy declarative base for all catalog models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
