"""
SQLAlchemy models for the QuickCart API.

These models represent customers, the product catalogue and placed orders.
They are defined using SQLAlchemy's declarative API and mapped to tables via
the `Base` class in :mod:`api.db`.
"""
from __future__ import annotations

import datetime as _dt
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Text,
    Float,
    JSON,
)
from sqlalchemy.orm import relationship

from .db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=_dt.datetime.utcnow)

    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    image = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=_dt.datetime.utcnow)


class Order(Base):
    """A placed order.  Line items are stored as a JSON snapshot."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    items = Column(JSON, nullable=False)
    total = Column(Float, nullable=False)
    created_at = Column(DateTime, default=_dt.datetime.utcnow)

    user = relationship("User", back_populates="orders")
