from typing import List, Optional
from framework.logging.logger import get_logger
from framework.exceptions.handler import BusinessException, NotFoundException
from framework.repository.paging import Page, PageRequest
from framework.repository.unit_of_work import UnitOfWork
from .models import Member, Team
from .repository import MemberRepository, TeamRepository
from .schemas import MemberDto

logger = get_logger("member_service")


def _to_dto(member: Member) -> MemberDto:
    # member.team must already be loaded
    return MemberDto(
        id=member.id,
        username=member.username,
        team_name=member.team.name if member.team else None,
    )


class MemberService:
    """Member/team use cases; each write commits through the UnitOfWork."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def members(self) -> MemberRepository:
        return self.uow.get_repository(MemberRepository)

    @property
    def teams(self) -> TeamRepository:
        return self.uow.get_repository(TeamRepository)

    async def create_team(self, name: str) -> Team:
        async with self.uow:
            team = await self.teams.save(Team(name=name))
        logger.info(f"Team {name} created with id {team.id}")
        return team

    async def join(self, username: str, age: int = 0, team_id: Optional[int] = None) -> Member:
        """Register a member, optionally on an existing team."""
        member = Member(username=username, age=age)
        async with self.uow:
            if team_id is not None:
                team = await self.teams.find_by_id(team_id)
                if team is None:
                    raise BusinessException(f"Team {team_id} does not exist", code=400)
                member.change_team(team)
            await self.members.save(member)
        logger.info(f"Member {username} joined with id {member.id}")
        return member

    async def get_member(self, member_id: int) -> Member:
        member = await self.members.find_by_id(member_id)
        if member is None:
            raise NotFoundException("Member not found", detail={"member_id": member_id})
        return member

    async def list_members(self, page_request: PageRequest) -> Page[MemberDto]:
        page = await self.members.find_page_with_team(page_request)
        return page.map(_to_dto)

    async def find_members_with_team(self, username: str) -> List[MemberDto]:
        members = await self.members.find_entity_graph_by_username(username)
        return [_to_dto(m) for m in members]

    async def bulk_age_plus(self, age: int) -> int:
        async with self.uow:
            updated = await self.members.bulk_age_plus(age)
        logger.info(f"Bulk age update committed: {updated} member(s) aged {age}+ got one year older")
        return updated
