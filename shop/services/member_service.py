# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for member registration, lookup and renaming."""
from typing import List

from shop.core.exceptions import MemberNotFoundError
from shop.core.logging import get_logger
from shop.metrics import MEMBER_UPDATES, MEMBERS_JOINED, MEMBERS_TOTAL
from shop.models.domain import Member
from shop.repositories.member_repository import MemberRepository

logger = get_logger(__name__)


class MemberService:
    def __init__(self, member_repo: MemberRepository):
        self._repo = member_repo

    def seed_gauges(self):
        MEMBERS_TOTAL.set(self._repo.count())
        logger.info("Prometheus gauges loaded from DB")

    def join(self, member: Member) -> int:
        saved = self._repo.save(member)
        MEMBERS_JOINED.inc()
        MEMBERS_TOTAL.inc()
        logger.info("Member joined id=%s", saved.id)
        return saved.id

    def find_members(self) -> List[Member]:
        return self._repo.find_all()

    def find_one(self, member_id: int) -> Member:
        member = self._repo.find_one(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    def update(self, member_id: int, name: str) -> None:
        if self._repo.update_name(member_id, name) is None:
            raise MemberNotFoundError(member_id)
        MEMBER_UPDATES.inc()
        logger.info("Member renamed id=%s", member_id)
