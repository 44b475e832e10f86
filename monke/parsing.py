"""Pratt parser building a syntax tree from tokens."""

from __future__ import annotations

from contextlib import nullcontext
from enum import IntEnum
from typing import Callable, ContextManager

from monke.lexer import Lexer
from monke.syntax import (
    BlockStatement,
    Boolean,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
    StringLiteral,
)
from monke.tokens import TokenType
from monke.tracing import Tracer

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    """Binding power of operators, weakest first."""

    LOWEST = 1
    EQUALS = 2
    LESSGREATER = 3
    SUM = 4
    PRODUCT = 5
    PREFIX = 6
    CALL = 7


_PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


class ParseError(Exception):
    """Raised when a program could not be parsed; holds every message."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = list(errors)


def _parse_int(literal: str) -> int:
    """Read an integer literal; a leading zero means octal."""
    if len(literal) > 1 and literal.startswith("0"):
        value = int(literal[1:], 8)
    else:
        value = int(literal, 10)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{literal} is out of range")
    return value


class Parser:
    """Parses the tokens of one lexer into a Program, collecting errors."""

    def __init__(self, lexer: Lexer, tracer: Tracer | None = None) -> None:
        self._lexer = lexer
        self._tracer = tracer
        self.errors: list[str] = []
        self._cur = lexer.next_token()
        self._peek = lexer.next_token()

        self._prefix_fns: dict[TokenType, Callable[[], Expression | None]] = {
            TokenType.IDENT: self._parse_identifier,
            TokenType.INT: self._parse_integer_literal,
            TokenType.BANG: self._parse_prefix_expression,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.TRUE: self._parse_boolean,
            TokenType.FALSE: self._parse_boolean,
            TokenType.LPAREN: self._parse_grouped_expression,
            TokenType.IF: self._parse_if_expression,
            TokenType.FUNCTION: self._parse_function_literal,
            TokenType.STRING: self._parse_string_literal,
        }
        infix_ops = (
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.SLASH,
            TokenType.ASTERISK,
            TokenType.EQ,
            TokenType.NOT_EQ,
            TokenType.LT,
            TokenType.GT,
        )
        self._infix_fns: dict[TokenType, Callable[[Expression], Expression | None]] = {
            op: self._parse_infix_expression for op in infix_ops
        }
        self._infix_fns[TokenType.LPAREN] = self._parse_call_expression

    # token handling

    def _next_token(self) -> None:
        self._cur = self._peek
        self._peek = self._lexer.next_token()

    def _cur_is(self, kind: TokenType) -> bool:
        return self._cur.type is kind

    def _peek_is(self, kind: TokenType) -> bool:
        return self._peek.type is kind

    def _expect_peek(self, kind: TokenType) -> bool:
        if self._peek_is(kind):
            self._next_token()
            return True
        self.errors.append(
            f"expected next token to be {kind.value}, got {self._peek.type.value} instead"
        )
        return False

    def _peek_precedence(self) -> int:
        return _PRECEDENCES.get(self._peek.type, Precedence.LOWEST)

    def _cur_precedence(self) -> int:
        return _PRECEDENCES.get(self._cur.type, Precedence.LOWEST)

    def _span(self, name: str) -> ContextManager[None]:
        if self._tracer is None:
            return nullcontext()
        return self._tracer.span(name)

    # statements

    def parse_program(self) -> Program:
        """Parse statements until the end of input."""
        program = Program()
        while not self._cur_is(TokenType.EOF):
            stmt = self._parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self._next_token()
        return program

    def _parse_statement(self) -> Statement | None:
        if self._cur_is(TokenType.LET):
            return self._parse_let_statement()
        if self._cur_is(TokenType.RETURN):
            return self._parse_return_statement()
        return self._parse_expression_statement()

    def _parse_let_statement(self) -> LetStatement | None:
        stmt = LetStatement(self._cur)
        if not self._expect_peek(TokenType.IDENT):
            return None
        stmt.name = Identifier(self._cur, self._cur.literal)
        if not self._expect_peek(TokenType.ASSIGN):
            return None
        self._next_token()
        stmt.value = self._parse_expression(Precedence.LOWEST)
        if self._peek_is(TokenType.SEMICOLON):
            self._next_token()
        return stmt

    def _parse_return_statement(self) -> ReturnStatement:
        stmt = ReturnStatement(self._cur)
        self._next_token()
        stmt.return_value = self._parse_expression(Precedence.LOWEST)
        if self._peek_is(TokenType.SEMICOLON):
            self._next_token()
        return stmt

    def _parse_expression_statement(self) -> ExpressionStatement:
        with self._span("parseExpressionStatement"):
            stmt = ExpressionStatement(self._cur)
            stmt.expression = self._parse_expression(Precedence.LOWEST)
            if self._peek_is(TokenType.SEMICOLON):
                self._next_token()
            return stmt

    def _parse_block_statement(self) -> BlockStatement:
        block = BlockStatement(self._cur)
        self._next_token()
        while not self._cur_is(TokenType.RBRACE) and not self._cur_is(TokenType.EOF):
            stmt = self._parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self._next_token()
        return block

    # expressions

    def _parse_expression(self, precedence: int) -> Expression | None:
        with self._span("parseExpression"):
            prefix = self._prefix_fns.get(self._cur.type)
            if prefix is None:
                self.errors.append(
                    f"no prefix parse function for {self._cur.type.value} found"
                )
                return None
            left = prefix()
            while not self._peek_is(TokenType.SEMICOLON) and precedence < self._peek_precedence():
                infix = self._infix_fns.get(self._peek.type)
                if infix is None:
                    return left
                self._next_token()
                left = infix(left)
            return left

    def _parse_identifier(self) -> Expression:
        return Identifier(self._cur, self._cur.literal)

    def _parse_integer_literal(self) -> Expression | None:
        with self._span("parseIntegerLiteral"):
            literal = self._cur.literal
            try:
                value = _parse_int(literal)
            except ValueError:
                self.errors.append(f'could not parse "{literal}" as integer')
                return None
            return IntegerLiteral(self._cur, value)

    def _parse_string_literal(self) -> Expression:
        return StringLiteral(self._cur, self._cur.literal)

    def _parse_boolean(self) -> Expression:
        return Boolean(self._cur, self._cur_is(TokenType.TRUE))

    def _parse_prefix_expression(self) -> Expression:
        with self._span("parsePrefixExpression"):
            expression = PrefixExpression(self._cur, self._cur.literal)
            self._next_token()
            expression.right = self._parse_expression(Precedence.PREFIX)
            return expression

    def _parse_infix_expression(self, left: Expression) -> Expression:
        with self._span("parseInfixExpression"):
            expression = InfixExpression(self._cur, left, self._cur.literal)
            precedence = self._cur_precedence()
            self._next_token()
            expression.right = self._parse_expression(precedence)
            return expression

    def _parse_grouped_expression(self) -> Expression | None:
        self._next_token()
        expression = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        return expression

    def _parse_if_expression(self) -> Expression | None:
        expression = IfExpression(self._cur)
        if not self._expect_peek(TokenType.LPAREN):
            return None
        self._next_token()
        expression.condition = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        if not self._expect_peek(TokenType.LBRACE):
            return None
        expression.consequence = self._parse_block_statement()
        if self._peek_is(TokenType.ELSE):
            self._next_token()
            if not self._expect_peek(TokenType.LBRACE):
                return None
            expression.alternative = self._parse_block_statement()
        return expression

    def _parse_function_literal(self) -> Expression | None:
        literal = FunctionLiteral(self._cur)
        if not self._expect_peek(TokenType.LPAREN):
            return None
        literal.parameters = self._parse_function_parameters()
        if not self._expect_peek(TokenType.LBRACE):
            return None
        literal.body = self._parse_block_statement()
        return literal

    def _parse_function_parameters(self) -> list[Identifier]:
        if self._peek_is(TokenType.RPAREN):
            self._next_token()
            return []
        self._next_token()
        identifiers = [Identifier(self._cur, self._cur.literal)]
        while self._peek_is(TokenType.COMMA):
            self._next_token()
            self._next_token()
            identifiers.append(Identifier(self._cur, self._cur.literal))
        if not self._expect_peek(TokenType.RPAREN):
            return []
        return identifiers

    def _parse_call_expression(self, function: Expression) -> Expression:
        expression = CallExpression(self._cur, function)
        expression.arguments = self._parse_call_arguments()
        return expression

    def _parse_call_arguments(self) -> list[Expression]:
        if self._peek_is(TokenType.RPAREN):
            self._next_token()
            return []
        self._next_token()
        args = [self._parse_expression(Precedence.LOWEST)]
        while self._peek_is(TokenType.COMMA):
            self._next_token()
            self._next_token()
            args.append(self._parse_expression(Precedence.LOWEST))
        if not self._expect_peek(TokenType.RPAREN):
            return []
        return args


def parse(source: str) -> Program:
    """Parse ``source`` into a Program, raising ParseError on any error."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    if parser.errors:
        raise ParseError(parser.errors)
    return program