# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Criteria holder for the order listing query."""
from dataclasses import dataclass
from typing import Optional

from shop.models.domain import OrderStatus


@dataclass
class OrderSearch:
    """Optional order filters. A field left as ``None`` does not filter."""

    member_name: Optional[str] = None
    order_status: Optional[OrderStatus] = None  # ORDER, CANCEL

    def has_member_name(self) -> bool:
        return bool(self.member_name and self.member_name.strip())
