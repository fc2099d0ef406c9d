from .interfaces import ChainReaderInterface
from .chain_reader import ChainReader, STAKING_ABI
