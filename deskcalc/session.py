import io
import logging
import sys
from typing import Optional, TextIO

from deskcalc.errors import CalculatorError, ExpressionSyntaxError
from deskcalc.parser import Parser
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import TokenKind, TokenStream
from deskcalc.utils import format_number

logger = logging.getLogger(__name__)

PROMPT = "> "
RESULT = "= "


class Session:
    """Everything one calculator session owns: input tokens, symbols and the parser working on them"""

    def __init__(
        self,
        stream: TextIO,
        output: Optional[TextIO] = None,
        errors: Optional[TextIO] = None,
        symbols: Optional[SymbolTable] = None,
    ) -> None:
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.tokens = TokenStream(stream, self.symbols)
        self.parser = Parser(self.tokens, self.symbols)
        self.output = output if output is not None else sys.stdout
        self.errors = errors if errors is not None else sys.stderr

    def statement(self) -> Optional[float]:
        """Evaluate the next statement; None means the user quit or input is over"""
        token = self.tokens.get()
        while token.kind is TokenKind.PRINT:
            token = self.tokens.get()
        if token.kind is TokenKind.QUIT:
            return None
        self.tokens.putback(token)

        try:
            value = self.parser.expression()
        except RecursionError:
            raise ExpressionSyntaxError("expression too deeply nested") from None

        following = self.tokens.get()
        self.tokens.putback(following)
        if following.kind is TokenKind.ASSIGN:
            # a valid assignment is consumed by the parser, so the target was a constant or an expression
            raise ExpressionSyntaxError("invalid assignment target")
        return value

    def calculate(self) -> None:
        while True:
            self.output.write(PROMPT)
            self.output.flush()
            try:
                value = self.statement()
                if value is None:
                    return
                print(f"{RESULT}{format_number(value)}", file=self.output)
            except CalculatorError as e:
                print(e, file=self.errors)
                logger.debug("Recovering from %s", type(e).__name__)
                self.tokens.ignore(TokenKind.PRINT)


def evaluate(code: str, symbols: Optional[SymbolTable] = None) -> list[float]:
    session = Session(io.StringIO(code), symbols=symbols)
    results: list[float] = []
    value = session.statement()
    while value is not None:
        results.append(value)
        value = session.statement()
    return results


def main() -> int:
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    try:
        Session(sys.stdin).calculate()
        return 0
    except Exception:
        # other errors, don't try to recover
        logger.debug("Unrecoverable error", exc_info=True)
        print("exception", file=sys.stderr)
        return 2
