# staking_tracker/registry/tokens.py

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

import msgspec

from ..core.errors import ConfigurationError, UnknownTokenError
from ..core.logging import TrackerLogger, log_with_context, INFO
from ..types import TokenDescriptor
from .defaults import DEFAULT_TOKENS


class TokenRegistry:
    """
    Immutable lookup of supported tokens, keyed by symbol and by token address.

    Built once at startup; symbols and token addresses must both be unique.
    Address lookups are case-insensitive.
    """

    def __init__(self, tokens: Iterable[TokenDescriptor]):
        by_symbol = {}
        by_address = {}

        for token in tokens:
            token.validate()
            address_key = token.token_address.lower()

            if token.symbol in by_symbol:
                raise ValueError(f"Duplicate token symbol in registry: {token.symbol}")
            if address_key in by_address:
                raise ValueError(f"Duplicate token address in registry: {token.token_address}")

            by_symbol[token.symbol] = token
            by_address[address_key] = token

        self._by_symbol: Mapping[str, TokenDescriptor] = MappingProxyType(by_symbol)
        self._by_address: Mapping[str, TokenDescriptor] = MappingProxyType(by_address)

    @classmethod
    def default(cls) -> 'TokenRegistry':
        return cls(DEFAULT_TOKENS)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'TokenRegistry':
        """Load a registry from a JSON array of token descriptor objects"""
        logger = TrackerLogger.get_logger('registry.tokens')
        path = Path(path)

        try:
            tokens = msgspec.json.decode(path.read_bytes(), type=list[TokenDescriptor])
        except (OSError, msgspec.DecodeError) as e:
            raise ConfigurationError(f"Could not load token registry from {path}: {e}") from e

        log_with_context(logger, INFO, "Token registry loaded from file",
                        path=str(path), count=len(tokens))
        return cls(tokens)

    def get(self, symbol: str) -> TokenDescriptor:
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise UnknownTokenError(symbol) from None

    def find_by_address(self, address: str) -> Optional[TokenDescriptor]:
        return self._by_address.get(address.lower())

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._by_symbol)

    def __iter__(self) -> Iterator[TokenDescriptor]:
        return iter(self._by_symbol.values())

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def __repr__(self) -> str:
        return f"<TokenRegistry(symbols={list(self.symbols)})>"


class LogoLookup:
    """Token address -> display image URL, derived from a TokenRegistry"""

    def __init__(self, registry: TokenRegistry):
        self._logos: Mapping[str, str] = MappingProxyType({
            token.token_address.lower(): token.logo_url
            for token in registry
            if token.logo_url
        })

    def get(self, token_address: str) -> str:
        return self._logos.get(token_address.lower(), "")

    def __len__(self) -> int:
        return len(self._logos)
