from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List


class Team(SQLModel, table=True):
    __tablename__ = "team"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    # Inverse side; member.team_id owns the association
    members: List["Member"] = Relationship(back_populates="team")

    def __repr__(self):
        return f"Team(id={self.id}, name={self.name!r})"


class Member(SQLModel, table=True):
    __tablename__ = "member"
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, max_length=255)
    age: int = Field(default=0)
    team_id: Optional[int] = Field(default=None, foreign_key="team.id", index=True)
    team: Optional[Team] = Relationship(back_populates="members")

    def change_team(self, team: Team) -> None:
        """Move member to team; the backref appends to team.members without loading it."""
        self.team = team

    def __repr__(self):
        # team is left out so printing never triggers a lazy load
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
