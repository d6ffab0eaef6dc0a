from abc import ABC, abstractmethod

class BaseDatabaseDriver(ABC):
    """Connection lifecycle shared by database drivers."""

    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass

    @abstractmethod
    def get_session(self):
        """Async generator yielding one session per unit of work."""
        pass
