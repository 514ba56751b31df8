# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for placing, cancelling and searching orders."""
from typing import List

from shop.core.exceptions import MemberNotFoundError, OrderNotFoundError
from shop.core.logging import get_logger
from shop.metrics import ORDERS_CANCELLED, ORDERS_PLACED
from shop.models.domain import Order, OrderStatus
from shop.repositories.member_repository import MemberRepository
from shop.repositories.order_repository import OrderRepository
from shop.repositories.order_search import OrderSearch

logger = get_logger(__name__)


class OrderService:
    def __init__(self, order_repo: OrderRepository, member_repo: MemberRepository):
        self._orders = order_repo
        self._members = member_repo

    def order(self, member_id: int) -> int:
        if self._members.find_one(member_id) is None:
            raise MemberNotFoundError(member_id)
        saved = self._orders.save(Order(member_id=member_id, status=OrderStatus.ORDER))
        ORDERS_PLACED.inc()
        logger.info("Order placed id=%s member=%s", saved.id, member_id)
        return saved.id

    def cancel_order(self, order_id: int) -> None:
        if self._orders.update_status(order_id, OrderStatus.CANCEL) is None:
            raise OrderNotFoundError(order_id)
        ORDERS_CANCELLED.inc()
        logger.info("Order cancelled id=%s", order_id)

    def find_orders(self, order_search: OrderSearch) -> List[Order]:
        return self._orders.find_all(order_search)
