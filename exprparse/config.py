"""
Parser configuration.

Author: xwest
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_INT_BITS = 32
MAX_INT_BITS = 8192  # keeps the limit's decimal form under Python's int/str digit cap

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ParserConfig:
    """Configuration for the Parser facade"""
    int_bits: Optional[int] = DEFAULT_INT_BITS  # None means no overflow check
    require_complete: bool = False              # raise on trailing input instead of warning
    filename: str = "<input>"                   # name used in error locations

    def __post_init__(self):
        if self.int_bits is not None and not 2 <= self.int_bits <= MAX_INT_BITS:
            raise ValueError(f"int_bits must be between 2 and {MAX_INT_BITS}, got {self.int_bits}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserConfig":
        """
        Build a config from EXPRPARSE_* environment variables.

        EXPRPARSE_INT_BITS: integer width, or "none" for unbounded
        EXPRPARSE_REQUIRE_COMPLETE: 1/true/yes/on to reject trailing input
        EXPRPARSE_FILENAME: name shown in error locations
        """
        env = os.environ if environ is None else environ
        config = cls()

        int_bits = env.get("EXPRPARSE_INT_BITS")
        if int_bits is not None and int_bits.strip():
            if int_bits.strip().lower() == "none":
                config.int_bits = None
            else:
                try:
                    config.int_bits = int(int_bits)
                except ValueError:
                    raise ValueError(f"EXPRPARSE_INT_BITS must be an integer or 'none', got {int_bits!r}") from None
                config.__post_init__()

        require_complete = env.get("EXPRPARSE_REQUIRE_COMPLETE")
        if require_complete is not None:
            config.require_complete = require_complete.strip().lower() in _TRUE_VALUES

        filename = env.get("EXPRPARSE_FILENAME")
        if filename:
            config.filename = filename

        return config
