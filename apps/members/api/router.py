from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.repository.paging import PageRequest, Sort
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ..schemas import BulkAgeRequest, MemberCreate, MemberRead, TeamCreate
from ..service import MemberService

router = APIRouter()


async def get_db():
    """Get database session."""
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session


def get_uow(db: AsyncSession = Depends(get_db)) -> UnitOfWork:
    """Dependency: create UnitOfWork."""
    return UnitOfWork(session=db)


def get_member_service(uow: UnitOfWork = Depends(get_uow)) -> MemberService:
    """Dependency: create MemberService."""
    return MemberService(uow)


def get_page_request(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    sort: List[str] = Query(default=[], description="property[,asc|desc], repeatable"),
) -> PageRequest:
    """Dependency: build a PageRequest from ?page=&size=&sort=username,desc."""
    size = min(size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return PageRequest.of(page, size, Sort.parse(sort))


@router.post("/teams")
async def create_team(data: TeamCreate, service: MemberService = Depends(get_member_service)):
    team = await service.create_team(data.name)
    return ResponseModel.success(data={"id": team.id, "name": team.name})


@router.post("/members")
async def join(data: MemberCreate, service: MemberService = Depends(get_member_service)):
    member = await service.join(data.username, data.age, data.team_id)
    return ResponseModel.success(data=MemberRead.model_validate(member, from_attributes=True))


@router.get("/members")
async def list_members(
    page_request: PageRequest = Depends(get_page_request),
    service: MemberService = Depends(get_member_service),
):
    """Paged member list (DTO projection with team name)."""
    page = await service.list_members(page_request)
    return ResponseModel.page(page)


@router.get("/members/graph/{username}")
async def members_with_team(username: str, service: MemberService = Depends(get_member_service)):
    """Members with the given username, team fetched in the same query."""
    return ResponseModel.success(data=await service.find_members_with_team(username))


@router.get("/members/{member_id}")
async def get_member(member_id: int, service: MemberService = Depends(get_member_service)):
    member = await service.get_member(member_id)
    return ResponseModel.success(data=MemberRead.model_validate(member, from_attributes=True))


@router.post("/members/bulk-age")
async def bulk_age_plus(data: BulkAgeRequest, service: MemberService = Depends(get_member_service)):
    """Add one year to every member at or above the given age."""
    updated = await service.bulk_age_plus(data.age)
    return ResponseModel.success(data={"updated": updated})
