# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Member API v2, DTO in and DTO out.
Pure HTTP layer; entities never cross this boundary.
"""
from typing import List

from fastapi import APIRouter, Depends, Path

from shop.core.dependencies import get_member_service
from shop.models.domain import Member
from shop.schemas import (
    CreateMemberRequest, CreateMemberResponse, ErrorResponse, MemberDto, Result,
    UpdateMemberRequest, UpdateMemberResponse,
)
from shop.services.member_service import MemberService

router = APIRouter(prefix="/api/v2", tags=["Members"])


@router.get("/members", response_model=Result[List[MemberDto]])
def list_members(service: MemberService = Depends(get_member_service)):
    members = service.find_members()
    return Result[List[MemberDto]](data=[MemberDto(name=m.name) for m in members])


@router.post("/members", status_code=201, response_model=CreateMemberResponse)
def create_member(body: CreateMemberRequest,
                  service: MemberService = Depends(get_member_service)):
    member = Member(name=body.name)
    return CreateMemberResponse(id=service.join(member))


@router.put("/members/{member_id}", response_model=UpdateMemberResponse,
            responses={404: {"model": ErrorResponse}})
def update_member(body: UpdateMemberRequest,
                  member_id: int = Path(..., description="Member id"),
                  service: MemberService = Depends(get_member_service)):
    service.update(member_id, body.name)
    # Report the stored state, not the request
    member = service.find_one(member_id)
    return UpdateMemberResponse(id=member.id, name=member.name)
