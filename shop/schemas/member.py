# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Member request/response schemas.

v2 DTOs are the API contract. ``MemberSchema`` mirrors the entity and is
only bound by the deprecated v1 endpoints.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ADDRESS_FIELDS = ("city", "street", "zipcode")


class MemberName(BaseModel):
    """A member name: non-empty and not only whitespace, stored as sent."""
    name: str = Field(..., min_length=1, max_length=255, examples=["Alice"])

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


# ── v2 contract ──────────────────────────────────────────────────────────

class CreateMemberRequest(MemberName):
    pass


class CreateMemberResponse(BaseModel):
    id: int


class UpdateMemberRequest(MemberName):
    pass


class UpdateMemberResponse(BaseModel):
    id: int
    name: str


class MemberDto(BaseModel):
    name: str


# ── v1 entity mirror ─────────────────────────────────────────────────────

class AddressSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    city: Optional[str] = Field(default=None, max_length=255)
    street: Optional[str] = Field(default=None, max_length=255)
    zipcode: Optional[str] = Field(default=None, max_length=20)


class MemberSchema(MemberName):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    address: Optional[AddressSchema] = None

    @field_validator("address", mode="before")
    @classmethod
    def empty_address_is_none(cls, v):
        # A persisted member without an address loads as Address(None, None, None)
        if v is None:
            return None
        if isinstance(v, dict):
            values = [v.get(f) for f in ADDRESS_FIELDS]
        else:
            values = [getattr(v, f, None) for f in ADDRESS_FIELDS]
        return None if all(x is None for x in values) else v
