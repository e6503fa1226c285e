import io
import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from deskcalc.errors import BadTokenError, BufferFullError
from deskcalc.symbols import SymbolTable
from deskcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


class TokenKind(PrintableEnum):
    LPAREN = "("
    RPAREN = ")"
    PRINT = ";"
    QUIT = "q"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    PERCENT = "%"
    ASSIGN = "="
    NUMBER = "number"
    NAME = "name"


PUNCT_TOKENS = {kind.value: kind for kind in TokenKind if len(kind.value) == 1}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: float = 0.0
    name: str = ""

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(kind=TokenKind.NUMBER, value=value)

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(kind=TokenKind.NAME, name=name)

    @classmethod
    def punct(cls, kind: TokenKind) -> "Token":
        return cls(kind=kind)

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"<{self.kind}>{self.value}"
        elif self.kind is TokenKind.NAME:
            return f"<{self.kind}>{self.name}"
        return f"<{self.kind}>"


class CharReader:
    """Character-at-a-time reader over a text stream with unlimited put-back"""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.pushed: list[str] = []

    def read(self) -> str:
        """Next character, or '' at end of input"""
        if self.pushed:
            return self.pushed.pop()
        return self.stream.read(1)

    def unread(self, ch: str) -> None:
        if ch:
            self.pushed.append(ch)

    def read_nonspace(self) -> str:
        ch = self.read()
        while ch and ch.isspace():
            ch = self.read()
        return ch


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in "0123456789"


def _is_valid_in_identifier(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class TokenStream:
    def __init__(self, stream: TextIO, symbols: SymbolTable) -> None:
        self.chars = CharReader(stream)
        self.symbols = symbols
        self.buffer: Optional[Token] = None

    @property
    def full(self) -> bool:
        return self.buffer is not None

    def get(self) -> Token:
        if self.buffer is not None:
            token, self.buffer = self.buffer, None
            return token

        ch = self.chars.read_nonspace()
        if not ch:
            return Token.punct(TokenKind.QUIT)
        if ch in PUNCT_TOKENS:
            return Token.punct(PUNCT_TOKENS[ch])
        if _is_digit(ch) or ch == ".":
            self.chars.unread(ch)
            return Token.number(self._read_number())
        if ch.isascii() and ch.isalpha():
            name = self._read_name(ch)
            constant = self.symbols.constant(name)
            if constant is not None:
                return Token.number(constant)
            return Token.identifier(name)
        raise BadTokenError(f"Bad token {ch!r}")

    def putback(self, token: Token) -> None:
        if self.buffer is not None:
            raise BufferFullError()
        self.buffer = token

    def ignore(self, kind: TokenKind) -> None:
        """Discard input up to and including the first occurrence of kind's character"""
        if self.buffer is not None and self.buffer.kind is kind:
            self.buffer = None
            return
        self.buffer = None

        skipped = 0
        ch = self.chars.read()
        while ch and ch != kind.value:
            skipped += 1
            ch = self.chars.read()
        logger.debug("Skipped %d characters looking for %r", skipped, kind.value)

    def _read_digits(self) -> str:
        digits = ""
        ch = self.chars.read()
        while _is_digit(ch):
            digits += ch
            ch = self.chars.read()
        self.chars.unread(ch)
        return digits

    def _read_number(self) -> float:
        literal = self._read_digits()
        ch = self.chars.read()
        if ch == ".":
            literal += ch + self._read_digits()
        else:
            self.chars.unread(ch)
        if not any(_is_digit(c) for c in literal):
            raise BadTokenError(f"Bad number {literal!r}")

        # exponent is only taken if at least one digit follows, "2e" is 2 followed by the constant e
        marker = self.chars.read()
        if marker in ("e", "E"):
            sign = self.chars.read()
            if sign not in ("+", "-"):
                self.chars.unread(sign)
                sign = ""
            exponent = self._read_digits()
            if exponent:
                literal += marker + sign + exponent
            else:
                self.chars.unread(sign)
                self.chars.unread(marker)
        else:
            self.chars.unread(marker)

        return float(literal)

    def _read_name(self, first: str) -> str:
        name = first
        ch = self.chars.read()
        while ch and _is_valid_in_identifier(ch):
            name += ch
            ch = self.chars.read()
        self.chars.unread(ch)
        return name


def tokenize(code: str, symbols: Optional[SymbolTable] = None) -> list[Token]:
    tokens = TokenStream(io.StringIO(code), symbols if symbols is not None else SymbolTable())
    result: list[Token] = []
    token = tokens.get()
    while token.kind is not TokenKind.QUIT:
        result.append(token)
        token = tokens.get()
    return result
