# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: order listing filtered by OrderSearch criteria."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from shop.core.dependencies import get_order_service
from shop.models.domain import OrderStatus
from shop.repositories.order_search import OrderSearch
from shop.schemas import OrderDto, Result
from shop.services.order_service import OrderService

router = APIRouter(prefix="/api/v2", tags=["Orders"])


@router.get("/orders", response_model=Result[List[OrderDto]])
def list_orders(
    member_name: Optional[str] = Query(default=None, max_length=255),
    order_status: Optional[OrderStatus] = Query(default=None),
    service: OrderService = Depends(get_order_service),
):
    orders = service.find_orders(OrderSearch(member_name, order_status))
    return Result[List[OrderDto]](data=[
        OrderDto(order_id=o.id, member_name=o.member.name,
                 order_status=o.status, order_date=o.order_date)
        for o in orders
    ])
