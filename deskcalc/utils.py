import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(value: float) -> str:
    """7.0 -> '7', 0.5 -> '0.5', 1e+16 -> '1e+16'"""
    result = repr(value)
    if result.endswith(".0"):
        result = result[:-2]
    return result
