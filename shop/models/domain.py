# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain entities: SQLAlchemy mappings, NO FastAPI dependency.
These shapes follow the database schema and are never a wire contract.
"""

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import composite, relationship

from shop.core.database import Base


class OrderStatus(str, enum.Enum):
    ORDER = "ORDER"
    CANCEL = "CANCEL"


@dataclass
class Address:
    """Embedded value object stored as three columns on its owner."""
    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None


class Member(Base):
    __tablename__ = "members"

    id = Column("member_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    city = Column(String(255))
    street = Column(String(255))
    zipcode = Column(String(20))
    address = composite(Address, city, street, zipcode)

    orders = relationship("Order", back_populates="member")

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, name={self.name!r})"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(Base):
    __tablename__ = "orders"

    id = Column("order_id", Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False)
    status = Column(Enum(OrderStatus, name="order_status"), nullable=False,
                    default=OrderStatus.ORDER)
    order_date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    member = relationship("Member", back_populates="orders")

    def __repr__(self) -> str:
        return f"Order(id={self.id!r}, status={self.status!r})"
