from .staking import DBStaking
