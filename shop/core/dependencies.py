# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories and services.
"""
from shop.core.database import SessionLocal
from shop.repositories.member_repository import MemberRepository
from shop.repositories.order_repository import OrderRepository
from shop.services.member_service import MemberService
from shop.services.order_service import OrderService

# ── Singleton repository instances ──
_member_repo = MemberRepository(SessionLocal)
_order_repo = OrderRepository(SessionLocal)

# ── Service instances (with injected dependencies) ──
_member_service = MemberService(member_repo=_member_repo)
_order_service = OrderService(order_repo=_order_repo, member_repo=_member_repo)


# ── FastAPI dependency functions ──
def get_member_service() -> MemberService:
    return _member_service


def get_order_service() -> OrderService:
    return _order_service


def get_member_repo() -> MemberRepository:
    return _member_repo
