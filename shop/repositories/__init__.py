# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports repositories and query criteria."""
from shop.repositories.member_repository import MemberRepository
from shop.repositories.order_repository import OrderRepository
from shop.repositories.order_search import OrderSearch

__all__ = ["MemberRepository", "OrderRepository", "OrderSearch"]
