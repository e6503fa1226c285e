from types import MappingProxyType
from typing import Mapping, Optional

from deskcalc.errors import UndefinedSymbolError

BUILTIN_CONSTANTS: Mapping[str, float] = MappingProxyType(
    {
        "pi": 3.14159265358979323846,
        "e": 2.71828182845904523536,
    }
)


class SymbolTable:
    """Read-only constants, resolved by the lexer, and user variables, resolved by the parser"""

    def __init__(self, constants: Optional[Mapping[str, float]] = None) -> None:
        self.constants: Mapping[str, float] = MappingProxyType(
            dict(constants if constants is not None else BUILTIN_CONSTANTS)
        )
        self.variables: dict[str, float] = dict()

    def constant(self, name: str) -> Optional[float]:
        return self.constants.get(name)

    def lookup(self, name: str) -> float:
        if name not in self.variables:
            raise UndefinedSymbolError(name)
        return self.variables[name]

    def assign(self, name: str, value: float) -> float:
        self.variables[name] = value
        return value
