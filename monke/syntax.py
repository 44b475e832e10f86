"""Syntax tree nodes and their source-like string forms."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field

from monke.tokens import Token


class Node(ABC):
    """Base of every syntax tree node."""

    token: Token

    def token_literal(self) -> str:
        """Return the literal of the token this node was built from."""
        return self.token.literal

    def __str__(self) -> str:
        return self.token_literal()


class Statement(Node):
    """A node that stands on its own in a program or block."""


class Expression(Node):
    """A node that produces a value."""


@dataclass
class Program(Node):
    """The root of a parsed program: a series of statements."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class LetStatement(Statement):
    token: Token
    name: Identifier | None = None
    value: Expression | None = None

    def __str__(self) -> str:
        value = "" if self.value is None else str(self.value)
        return f"{self.token_literal()} {self.name} = {value};"


@dataclass
class ReturnStatement(Statement):
    token: Token
    return_value: Expression | None = None

    def __str__(self) -> str:
        value = "" if self.return_value is None else str(self.return_value)
        return f"{self.token_literal()} {value};"


@dataclass
class ExpressionStatement(Statement):
    token: Token
    expression: Expression | None = None

    def __str__(self) -> str:
        return "" if self.expression is None else str(self.expression)


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int = 0

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class StringLiteral(Expression):
    token: Token
    value: str = ""

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpression(Expression):
    token: Token
    operator: str
    right: Expression | None = None

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression(Expression):
    token: Token
    left: Expression
    operator: str
    right: Expression | None = None

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class Boolean(Expression):
    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass
class IfExpression(Expression):
    token: Token
    condition: Expression | None = None
    consequence: BlockStatement | None = None
    alternative: BlockStatement | None = None

    def __str__(self) -> str:
        text = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            text += f"else{self.alternative}"
        return text


@dataclass
class FunctionLiteral(Expression):
    token: Token
    parameters: list[Identifier] = field(default_factory=list)
    body: BlockStatement | None = None

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {self.body}"


@dataclass
class CallExpression(Expression):
    token: Token
    function: Expression
    arguments: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"