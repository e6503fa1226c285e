from dataclasses import dataclass


@dataclass
class CalculatorError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


class BadTokenError(CalculatorError):
    pass


class ExpressionSyntaxError(CalculatorError):
    pass


class DivideByZeroError(CalculatorError):
    def __init__(self) -> None:
        super().__init__("divide by zero")


class UndefinedSymbolError(CalculatorError):
    def __init__(self, name: str) -> None:
        super().__init__(f"undefined symbol: {name}")
        self.name = name


@dataclass
class BufferFullError(Exception):
    """Raised on a second putback() into an occupied token buffer; a bug, never user input"""

    errmsg: str = "putback() into a full buffer"

    def __str__(self) -> str:
        return self.errmsg
