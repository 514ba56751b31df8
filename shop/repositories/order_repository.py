# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for orders and the criteria-driven order listing."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import contains_eager, joinedload, sessionmaker

from shop.core.config import settings
from shop.core.logging import get_logger
from shop.models.domain import Member, Order, OrderStatus
from shop.repositories.order_search import OrderSearch

logger = get_logger(__name__)


class OrderRepository:
    def __init__(self, session_factory: sessionmaker, max_results: int = settings.MAX_ORDER_RESULTS):
        self._session_factory = session_factory
        self._max_results = max_results

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, order: Order) -> Order:
        with self._session_factory.begin() as session:
            session.add(order)
            session.flush()
        return order

    def update_status(self, order_id: int, status: OrderStatus) -> Optional[Order]:
        with self._session_factory.begin() as session:
            order = session.get(Order, order_id, options=[joinedload(Order.member)])
            if order is None:
                return None
            order.status = status
        return order

    # ── Read ───────────────────────────────────────────────────────────

    def find_one(self, order_id: int) -> Optional[Order]:
        with self._session_factory() as session:
            return session.get(Order, order_id, options=[joinedload(Order.member)])

    def find_all(self, order_search: OrderSearch) -> List[Order]:
        """Exact match on every criterion that is set; blank names are ignored."""
        stmt = select(Order).join(Order.member).options(contains_eager(Order.member))
        if order_search.order_status is not None:
            stmt = stmt.where(Order.status == order_search.order_status)
        if order_search.has_member_name():
            stmt = stmt.where(Member.name == order_search.member_name)
        stmt = stmt.order_by(Order.id).limit(self._max_results)

        with self._session_factory() as session:
            orders = list(session.scalars(stmt))
        logger.debug("Order search member_name=%s status=%s matched=%d",
                     order_search.member_name, order_search.order_status, len(orders))
        return orders
