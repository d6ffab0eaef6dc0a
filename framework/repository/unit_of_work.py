"""
Unit of Work: manages repositories and transaction boundaries.
"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession


class UnitOfWork:
    """Manages related repositories with a shared session and transaction commit/rollback."""

    def __init__(self, session: Optional[AsyncSession] = None):
        """Initialize UnitOfWork; session must be provided."""
        if session is None:
            raise ValueError("Session must be provided.")

        self.session = session
        self._repositories = {}

    def get_repository(self, repo_class):
        """Get or create a repository instance bound to this session (cached per class)."""
        cache_key = repo_class.__name__
        if cache_key not in self._repositories:
            self._repositories[cache_key] = repo_class(self.session)
        return self._repositories[cache_key]

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()
