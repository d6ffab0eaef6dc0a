"""Session-level MemberStore / TeamStore test cases."""
import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from apps.members.models import Member, Team
from apps.members.store import MemberStore, TeamStore


@pytest.fixture
def member_store(async_session: AsyncSession) -> MemberStore:
    return MemberStore(async_session)


@pytest.fixture
def team_store(async_session: AsyncSession) -> TeamStore:
    return TeamStore(async_session)


@pytest.mark.asyncio
async def test_save_and_find(member_store: MemberStore):
    member = Member(username="user1")
    saved = await member_store.save(member)

    found = await member_store.find(saved.id)

    assert found.id == saved.id
    assert found.username == saved.username
    assert found is member


@pytest.mark.asyncio
async def test_basic_crud(member_store: MemberStore):
    member1 = await member_store.save(Member(username="member1"))
    member2 = await member_store.save(Member(username="member2"))

    assert await member_store.find_by_id(member1.id) is member1
    assert await member_store.find_by_id(member2.id) is member2
    assert len(await member_store.find_all()) == 2
    assert await member_store.count() == 2

    await member_store.delete(member1)
    await member_store.delete(member2)

    assert await member_store.count() == 0
    assert await member_store.find_by_id(member1.id) is None


@pytest.mark.asyncio
async def test_find_by_username_and_age_greater_than(member_store: MemberStore):
    await member_store.save(Member(username="AAA", age=11))
    await member_store.save(Member(username="AAA", age=21))

    result = await member_store.find_by_username_and_age_greater_than("AAA", 11)

    assert len(result) == 1
    assert result[0].username == "AAA"
    assert result[0].age == 21


@pytest.mark.asyncio
async def test_paging(member_store: MemberStore, four_members_aged_ten):
    result = await member_store.find_by_page(10, 0, 3)
    total = await member_store.total_count(10)

    assert [m.username for m in result] == ["park", "kim", "ha"]
    assert total == 4
    assert [m.username for m in await member_store.find_by_page(10, 3, 3)] == ["choi"]
    assert await member_store.total_count(99) == 0


@pytest.mark.asyncio
async def test_bulk_update(member_store: MemberStore):
    for name, age in [("kim", 11), ("choi", 11), ("ha", 10), ("park", 13)]:
        await member_store.save(Member(username=name, age=age))

    count = await member_store.bulk_age_plus(11)

    assert count == 3
    assert sorted(m.age for m in await member_store.find_all()) == [10, 12, 12, 14]


@pytest.mark.asyncio
async def test_team_store_crud(team_store: TeamStore):
    team_a = await team_store.save(Team(name="teamA"))
    team_b = await team_store.save(Team(name="teamB"))

    assert await team_store.find_by_id(team_a.id) is team_a
    assert [t.name for t in await team_store.find_all()] == ["teamA", "teamB"]
    assert await team_store.count() == 2

    await team_store.delete(team_a)
    await team_store.delete(team_b)

    assert await team_store.count() == 0


@pytest.mark.asyncio
async def test_member_keeps_team_reference(member_store: MemberStore, team_store: TeamStore):
    team = await team_store.save(Team(name="teamA"))
    member = await member_store.save(Member(username="member1", age=10, team=team))

    assert member.team_id == team.id


@pytest.mark.asyncio
async def test_bulk_update_detaches_stale_instances(async_session: AsyncSession, member_store: MemberStore):
    for name, age in [("kim", 10), ("choi", 20), ("ha", 30), ("park", 40)]:
        await member_store.save(Member(username=name, age=age))
    ha = (await member_store.find_by_username_and_age_greater_than("ha", 0))[0]

    assert await member_store.bulk_age_plus(20) == 3

    assert ha not in async_session
    assert ha.age == 30
    reloaded = await member_store.find(ha.id)
    assert reloaded is not ha
    assert reloaded.age == 31
