"""Member API test cases."""
import pytest
from httpx import AsyncClient


async def _create_team(client: AsyncClient, name: str) -> int:
    response = await client.post("/api/v1/teams", json={"name": name})
    assert response.status_code == 200
    return response.json()["data"]["id"]


async def _join(client: AsyncClient, username: str, age: int, team_id=None) -> dict:
    response = await client.post("/api/v1/members", json={"username": username, "age": age, "team_id": team_id})
    assert response.status_code == 200
    return response.json()["data"]


class TestMemberApi:

    @pytest.mark.asyncio
    async def test_join_and_get_member(self, client: AsyncClient):
        team_id = await _create_team(client, "teamA")
        created = await _join(client, "member1", 10, team_id)

        response = await client.get(f"/api/v1/members/{created['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == 200
        assert data["data"] == {"id": created["id"], "username": "member1", "age": 10, "team_id": team_id}
        assert "X-Trace-ID" in response.headers

    @pytest.mark.asyncio
    async def test_get_missing_member(self, client: AsyncClient):
        response = await client.get("/api/v1/members/9999")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == 404
        assert data["message"] == "Member not found"

    @pytest.mark.asyncio
    async def test_join_unknown_team(self, client: AsyncClient):
        response = await client.post("/api/v1/members", json={"username": "member1", "age": 10, "team_id": 77})

        assert response.json()["code"] == 400

    @pytest.mark.asyncio
    async def test_join_validation_error(self, client: AsyncClient):
        response = await client.post("/api/v1/members", json={"username": "", "age": -1})

        assert response.status_code == 422
        assert response.json()["code"] == 422

    @pytest.mark.asyncio
    async def test_list_members_paged(self, client: AsyncClient):
        for name in ["kim", "choi", "ha", "park"]:
            await _join(client, name, 10)

        response = await client.get("/api/v1/members", params={"page": 0, "size": 3, "sort": "username,desc"})

        assert response.status_code == 200
        page = response.json()["data"]
        assert [m["username"] for m in page["content"]] == ["park", "kim", "ha"]
        assert page["total_elements"] == 4
        assert page["total_pages"] == 2
        assert page["is_first"] is True
        assert page["has_next"] is True

    @pytest.mark.asyncio
    async def test_list_members_bad_sort(self, client: AsyncClient):
        response = await client.get("/api/v1/members", params={"sort": "nickname,asc"})

        assert response.status_code == 400
        assert response.json()["code"] == 400

    @pytest.mark.asyncio
    async def test_members_with_team(self, client: AsyncClient):
        team_a = await _create_team(client, "teamA")
        team_b = await _create_team(client, "teamB")
        await _join(client, "member1", 10, team_a)
        await _join(client, "member1", 10, team_b)

        response = await client.get("/api/v1/members/graph/member1")

        assert [m["team_name"] for m in response.json()["data"]] == ["teamA", "teamB"]

    @pytest.mark.asyncio
    async def test_bulk_age(self, client: AsyncClient):
        for name, age in [("kim", 10), ("choi", 20), ("ha", 30), ("park", 40)]:
            await _join(client, name, age)

        response = await client.post("/api/v1/members/bulk-age", json={"age": 20})

        assert response.json()["data"] == {"updated": 3}
