# staking_tracker/database/tables/staking.py

from sqlalchemy import Column, String, Integer, Float, Boolean, Text, JSON, Index

from ..base import DBBaseModel
from ..types import EvmAddressType


class DBStaking(DBBaseModel):
    """Latest known staking state for one token/project pairing"""
    __tablename__ = 'staking'

    # Business key, deliberately not unique: lookups by it return a list
    protocol_id = Column(String(100), nullable=False, index=True)
    token_address = Column(EvmAddressType(), nullable=False, unique=True)
    staking_address = Column(EvmAddressType(), nullable=False)
    token_symbol = Column(String(20), nullable=False)
    project_name = Column(String(100), nullable=False)
    chain = Column(String(100), nullable=False)
    apy = Column(Integer, nullable=False, default=0)
    tvl = Column(Float, nullable=False, default=0.0)
    is_stablecoin = Column(Boolean, nullable=False, default=False)
    categories = Column(JSON, nullable=False, default=list)
    logo_url = Column(Text, nullable=False, default="")

    __table_args__ = (
        Index('idx_staking_symbol', 'token_symbol'),
    )

    def __repr__(self) -> str:
        return f"<Staking(protocol_id='{self.protocol_id}', token={self.token_address}, apy={self.apy}, tvl={self.tvl})>"
