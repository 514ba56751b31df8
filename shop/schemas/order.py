# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Order listing schemas."""
from datetime import datetime

from pydantic import BaseModel

from shop.models.domain import OrderStatus


class OrderDto(BaseModel):
    order_id: int
    member_name: str
    order_status: OrderStatus
    order_date: datetime
