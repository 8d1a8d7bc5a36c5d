"""Declarative base shared by the SQLAlchemy models."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
