# staking_tracker/database/__init__.py

from .base import Base, DBBaseModel
from .connection import DatabaseManager
from .tables import DBStaking
from .repositories import StakingRepository
from .store import StakingStore
