from .staking_repository import StakingRepository
