"""
Model registration for migrations and create_all: import every table model here.
"""
from apps.members.models import Member, Team

__all__ = ["Member", "Team"]
