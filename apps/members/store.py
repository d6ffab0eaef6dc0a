"""
Session-level stores: each query written out by hand against the session,
without the generic repository base.
"""

from typing import Optional, List
from sqlmodel import select, func, col
from sqlmodel.ext.asyncio.session import AsyncSession
from .models import Member, Team
from .repository import bulk_increment_age


class MemberStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, member: Member) -> Member:
        self.session.add(member)
        await self.session.flush()
        return member

    async def delete(self, member: Member) -> None:
        await self.session.delete(member)
        await self.session.flush()

    async def find_all(self) -> List[Member]:
        result = await self.session.exec(select(Member).order_by(col(Member.id)))
        return list(result.all())

    async def find_by_id(self, member_id: int) -> Optional[Member]:
        return await self.find(member_id)

    async def count(self) -> int:
        result = await self.session.exec(select(func.count(Member.id)))
        return result.one()

    async def find(self, member_id: int) -> Optional[Member]:
        return await self.session.get(Member, member_id)

    async def find_by_username_and_age_greater_than(self, username: str, age: int) -> List[Member]:
        statement = select(Member).where(Member.username == username, col(Member.age) > age)
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_by_page(self, age: int, offset: int, limit: int) -> List[Member]:
        """Members of the given age ordered by username descending."""
        statement = (
            select(Member)
            .where(Member.age == age)
            .order_by(col(Member.username).desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def total_count(self, age: int) -> int:
        result = await self.session.exec(select(func.count(Member.id)).where(Member.age == age))
        return result.one()

    async def bulk_age_plus(self, age: int) -> int:
        return await bulk_increment_age(self.session, age)


class TeamStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, team: Team) -> Team:
        self.session.add(team)
        await self.session.flush()
        return team

    async def delete(self, team: Team) -> None:
        await self.session.delete(team)
        await self.session.flush()

    async def find_all(self) -> List[Team]:
        result = await self.session.exec(select(Team).order_by(col(Team.id)))
        return list(result.all())

    async def find_by_id(self, team_id: int) -> Optional[Team]:
        return await self.session.get(Team, team_id)

    async def count(self) -> int:
        result = await self.session.exec(select(func.count(Team.id)))
        return result.one()
