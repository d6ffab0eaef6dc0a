from typing import Optional
from pydantic import BaseModel, Field


class MemberDto(BaseModel):
    """Flat projection of a member and the name of its team."""
    id: int
    username: str
    team_name: Optional[str] = None


class MemberRead(BaseModel):
    id: int
    username: str
    age: int
    team_id: Optional[int] = None


class MemberCreate(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    age: int = Field(default=0, ge=0)
    team_id: Optional[int] = None


class TeamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class BulkAgeRequest(BaseModel):
    age: int = Field(ge=0, description="Members at or above this age get +1")
