# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Models package: re-exports the mapped entities."""
from shop.models.domain import Address, Member, Order, OrderStatus

__all__ = ["Address", "Member", "Order", "OrderStatus"]
