# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service package: re-exports the business services."""
from shop.services.member_service import MemberService
from shop.services.order_service import OrderService

__all__ = ["MemberService", "OrderService"]
