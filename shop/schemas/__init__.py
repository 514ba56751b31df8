# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from shop.schemas.common import ErrorResponse, Result
from shop.schemas.member import (
    AddressSchema, CreateMemberRequest, CreateMemberResponse, MemberDto,
    MemberSchema, UpdateMemberRequest, UpdateMemberResponse,
)
from shop.schemas.order import OrderDto

__all__ = [
    "AddressSchema", "CreateMemberRequest", "CreateMemberResponse",
    "ErrorResponse", "MemberDto", "MemberSchema", "OrderDto", "Result",
    "UpdateMemberRequest", "UpdateMemberResponse",
]
