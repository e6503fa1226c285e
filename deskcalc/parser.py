"""
Recursive-descent parser that evaluates while it parses, no AST is built.

grammar:
expression : term ((PLUS | MINUS) term)*
term       : primary ((STAR | SLASH | PERCENT) primary)*
primary    : NUMBER
           | LPAREN expression RPAREN
           | MINUS primary
           | NAME (ASSIGN expression)?

Precedence comes only from which level calls which: unary minus and
parentheses bind tightest, then * / %, then + -. Constant names never reach
the parser as NAME, the tokenizer turns them into NUMBER.
"""

import math

from deskcalc.errors import DivideByZeroError, ExpressionSyntaxError
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import TokenKind, TokenStream


class Parser:
    def __init__(self, tokens: TokenStream, symbols: SymbolTable) -> None:
        self.tokens = tokens
        self.symbols = symbols

    def expression(self) -> float:
        left = self.term()
        while True:
            token = self.tokens.get()
            if token.kind is TokenKind.PLUS:
                left += self.term()
            elif token.kind is TokenKind.MINUS:
                left -= self.term()
            else:
                self.tokens.putback(token)
                return left

    def term(self) -> float:
        left = self.primary()
        while True:
            token = self.tokens.get()
            if token.kind is TokenKind.STAR:
                left *= self.primary()
            elif token.kind is TokenKind.SLASH:
                left /= self._divisor()
            elif token.kind is TokenKind.PERCENT:
                left = math.fmod(left, self._divisor())
            else:
                self.tokens.putback(token)
                return left

    def primary(self) -> float:
        token = self.tokens.get()
        if token.kind is TokenKind.NUMBER:
            return token.value
        elif token.kind is TokenKind.LPAREN:
            value = self.expression()
            closing = self.tokens.get()
            if closing.kind is not TokenKind.RPAREN:
                # leave the offending token for error recovery, it may be the terminator
                self.tokens.putback(closing)
                raise ExpressionSyntaxError("')' expected")
            return value
        elif token.kind is TokenKind.MINUS:
            # a chain of signs folds into one negation, "- - - 5" is -(-(-5))
            negate = True
            token = self.tokens.get()
            while token.kind is TokenKind.MINUS:
                negate = not negate
                token = self.tokens.get()
            self.tokens.putback(token)
            value = self.primary()
            return -value if negate else value
        elif token.kind is TokenKind.NAME:
            following = self.tokens.get()
            if following.kind is TokenKind.ASSIGN:
                return self.symbols.assign(token.name, self.expression())
            self.tokens.putback(following)
            return self.symbols.lookup(token.name)
        else:
            self.tokens.putback(token)
            raise ExpressionSyntaxError("primary expected")

    def _divisor(self) -> float:
        divisor = self.primary()
        if divisor == 0:
            raise DivideByZeroError()
        return divisor
