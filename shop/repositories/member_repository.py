# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for members."""
from typing import List, Optional

from sqlalchemy import func, select, text
from sqlalchemy.orm import sessionmaker

from shop.models.domain import Member


class MemberRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, member: Member) -> Member:
        with self._session_factory.begin() as session:
            session.add(member)
            session.flush()
        return member

    def update_name(self, member_id: int, name: str) -> Optional[Member]:
        with self._session_factory.begin() as session:
            member = session.get(Member, member_id)
            if member is None:
                return None
            member.name = name
        return member

    # ── Read ───────────────────────────────────────────────────────────

    def find_one(self, member_id: int) -> Optional[Member]:
        with self._session_factory() as session:
            return session.get(Member, member_id)

    def find_all(self) -> List[Member]:
        with self._session_factory() as session:
            return list(session.scalars(select(Member).order_by(Member.id)))

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(Member)) or 0

    def verify_connection(self):
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))
