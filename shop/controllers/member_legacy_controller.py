# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Member API v1, binding the entity shape directly.

Deprecated. Any change to the Member mapping changes this wire format;
new clients use /api/v2. Mounted only when LEGACY_API_ENABLED is set.
"""
from typing import List

from fastapi import APIRouter, Depends

from shop.core.dependencies import get_member_service
from shop.models.domain import Address, Member
from shop.schemas import CreateMemberResponse, MemberSchema
from shop.services.member_service import MemberService

router = APIRouter(prefix="/api/v1", tags=["Members (legacy)"], deprecated=True)


@router.get("/members", response_model=List[MemberSchema])
def list_members_v1(service: MemberService = Depends(get_member_service)):
    return [MemberSchema.model_validate(m) for m in service.find_members()]


@router.post("/members", status_code=201, response_model=CreateMemberResponse)
def create_member_v1(body: MemberSchema,
                     service: MemberService = Depends(get_member_service)):
    member = Member(name=body.name)
    if body.address is not None:
        member.address = Address(**body.address.model_dump())
    return CreateMemberResponse(id=service.join(member))
