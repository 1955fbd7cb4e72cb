from __future__ import annotations

from typing import Optional


class RotorlabError(ValueError):
    """Base class for every error raised by the machine package."""


class ConfigurationError(RotorlabError):
    """Raised while assembling a machine from an invalid configuration."""


class InvalidSymbol(RotorlabError):
    """A component was fed a character outside the alphabet."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} is not in the alphabet")


class EncodingError(RotorlabError):
    """A message contained a character the machine cannot encipher."""

    def __init__(self, symbol: str, index: Optional[int] = None):
        self.symbol = symbol
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Cannot encode character {symbol!r}{where}: only A-Z is accepted")
