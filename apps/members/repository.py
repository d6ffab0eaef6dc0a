"""Member module repository implementations."""

from typing import Optional, List, Sequence
from sqlalchemy import update
from sqlalchemy.orm import joinedload
from sqlmodel import select, col
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.logging.logger import get_logger
from framework.repository.base import BaseRepository
from framework.repository.paging import Page, PageRequest
from .models import Member, Team
from .schemas import MemberDto

logger = get_logger("member_repository")


async def bulk_increment_age(session: AsyncSession, age: int) -> int:
    """
    One UPDATE adding a year to every member aged `age` or older; returns affected rows.

    Pending changes are flushed first and the identity map is cleared afterwards,
    so no stale in-memory copy of an updated row is served from the session.
    """
    await session.flush()
    result = await session.execute(
        update(Member)
        .where(col(Member.age) >= age)
        .values(age=Member.age + 1)
        .execution_options(synchronize_session=False)
    )
    session.expunge_all()
    logger.info(f"Bulk age update (age >= {age}) affected {result.rowcount} member(s)")
    return result.rowcount


class TeamRepository(BaseRepository[Team]):
    """Team repository."""

    def __init__(self, session):
        super().__init__(session, Team)

    async def find_by_name(self, name: str) -> Optional[Team]:
        return await self.find_one(name=name)


class MemberRepository(BaseRepository[Member]):
    """Member repository: generic CRUD plus member-specific queries."""

    def __init__(self, session):
        super().__init__(session, Member)

    async def find_by_username_and_age_greater_than(self, username: str, age: int) -> List[Member]:
        """Exact username match, strictly older than age."""
        statement = select(Member).where(
            Member.username == username,
            col(Member.age) > age
        ).order_by(col(Member.id))
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_top3(self) -> List[Member]:
        """First three members by id."""
        statement = select(Member).order_by(col(Member.id)).limit(3)
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_user(self, username: str, age: int) -> List[Member]:
        statement = select(Member).where(Member.username == username, Member.age == age)
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_username_list(self) -> List[str]:
        statement = select(Member.username).order_by(col(Member.id))
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_member_dto(self) -> List[MemberDto]:
        """Members that belong to a team, projected to MemberDto (inner join)."""
        statement = (
            select(Member.id, Member.username, Team.name)
            .join(Team, col(Member.team_id) == col(Team.id))
            .order_by(col(Member.id))
        )
        result = await self.session.exec(statement)
        return [
            MemberDto(id=member_id, username=username, team_name=team_name)
            for member_id, username, team_name in result.all()
        ]

    async def find_by_names(self, names: Sequence[str]) -> List[Member]:
        if not names:
            return []
        statement = select(Member).where(col(Member.username).in_(list(names))).order_by(col(Member.id))
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_one_by_username(self, username: str) -> Optional[Member]:
        """
        Single-result lookup.

        Returns None when no member matches; raises sqlalchemy.exc.MultipleResultsFound
        when the username is shared by more than one member.
        """
        statement = select(Member).where(Member.username == username)
        result = await self.session.exec(statement)
        return result.one_or_none()

    async def find_list_by_username(self, username: str) -> List[Member]:
        return await self.find_all_by(username=username)

    async def find_by_age(self, age: int, page_request: PageRequest) -> Page[Member]:
        """Page of members with the given age; total comes from a separate count query."""
        return await self.find_page(page_request, Member.age == age)

    async def bulk_age_plus(self, age: int) -> int:
        """
        Increment age by one for every member aged `age` or older.

        Runs as a single UPDATE statement, so the identity map is cleared afterwards;
        instances loaded before the call are detached and keep their old values.
        """
        return await bulk_increment_age(self.session, age)

    async def find_entity_graph_by_username(self, username: str) -> List[Member]:
        """Members with the given username, team loaded in the same query."""
        statement = (
            select(Member)
            .options(joinedload(Member.team))
            .where(Member.username == username)
            .order_by(col(Member.id))
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_page_with_team(self, page_request: PageRequest) -> Page[Member]:
        return await self.find_page(page_request, options=[joinedload(Member.team)])

    async def find_all_with_team(self) -> List[Member]:
        statement = select(Member).options(joinedload(Member.team)).order_by(col(Member.id))
        result = await self.session.exec(statement)
        return list(result.all())
