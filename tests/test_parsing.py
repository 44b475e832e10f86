import pytest

from monke.lexer import Lexer
from monke.parsing import ParseError, Parser, Precedence, parse
from monke.syntax import (
    Boolean,
    CallExpression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    ReturnStatement,
    StringLiteral,
)


def _check_literal(exp, expected):
    if isinstance(expected, bool):
        assert isinstance(exp, Boolean)
        assert exp.value is expected
        assert exp.token_literal() == ("true" if expected else "false")
    elif isinstance(expected, int):
        assert isinstance(exp, IntegerLiteral)
        assert exp.value == expected
        assert exp.token_literal() == str(expected)
    else:
        assert isinstance(exp, Identifier)
        assert exp.value == expected
        assert exp.token_literal() == expected


def _check_infix(exp, left, operator, right):
    assert isinstance(exp, InfixExpression)
    _check_literal(exp.left, left)
    assert exp.operator == operator
    _check_literal(exp.right, right)


def _single_expression(source):
    program = parse(source)
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, ExpressionStatement)
    return stmt.expression


@pytest.mark.parametrize(
    "source, name, value",
    [("let x = 5;", "x", 5), ("let y = true;", "y", True), ("let foobar = y;", "foobar", "y")],
)
def test_let_statements(source, name, value):
    program = parse(source)
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert stmt.token_literal() == "let"
    assert isinstance(stmt, LetStatement)
    assert stmt.name.value == name
    assert stmt.name.token_literal() == name
    _check_literal(stmt.value, value)


@pytest.mark.parametrize(
    "source, value", [("return 5;", 5), ("return true;", True), ("return foobar;", "foobar")]
)
def test_return_statements(source, value):
    program = parse(source)
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, ReturnStatement)
    assert stmt.token_literal() == "return"
    _check_literal(stmt.return_value, value)


def test_identifier_expression():
    _check_literal(_single_expression("foobar;"), "foobar")


def test_integer_literal_expression():
    _check_literal(_single_expression("5;"), 5)


@pytest.mark.parametrize(
    "source, operator, value",
    [("!5", "!", 5), ("-15", "-", 15), ("!true;", "!", True), ("!false", "!", False)],
)
def test_prefix_expressions(source, operator, value):
    exp = _single_expression(source)
    assert isinstance(exp, PrefixExpression)
    assert exp.operator == operator
    _check_literal(exp.right, value)


@pytest.mark.parametrize(
    "source, left, operator, right",
    [
        ("5+5", 5, "+", 5),
        ("5-5", 5, "-", 5),
        ("5*5", 5, "*", 5),
        ("5/5", 5, "/", 5),
        ("5>5", 5, ">", 5),
        ("5<5", 5, "<", 5),
        ("5==5", 5, "==", 5),
        ("5!=5", 5, "!=", 5),
        ("true == true", True, "==", True),
        ("true != false", True, "!=", False),
        ("false == false", False, "==", False),
    ],
)
def test_infix_expressions(source, left, operator, right):
    _check_infix(_single_expression(source), left, operator, right)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("-a * b", "((-a) * b)"),
        ("!-a", "(!(-a))"),
        ("a+b+c", "((a + b) + c)"),
        ("a+b-c", "((a + b) - c)"),
        ("a*b*c", "((a * b) * c)"),
        ("a*b/c", "((a * b) / c)"),
        ("a/b*c", "((a / b) * c)"),
        ("a+b/c", "(a + (b / c))"),
        ("a+b*c+d", "((a + (b * c)) + d)"),
        ("3+4; -5*5", "(3 + 4)((-5) * 5)"),
        ("5>4==3<4", "((5 > 4) == (3 < 4))"),
        ("5<4!=3>4", "((5 < 4) != (3 > 4))"),
        ("3+4*5==3*1+4*5", "((3 + (4 * 5)) == ((3 * 1) + (4 * 5)))"),
        ("true", "true"),
        ("false", "false"),
        ("3>5 == false", "((3 > 5) == false)"),
        ("3<5 == true", "((3 < 5) == true)"),
        ("1 + (2 + 3) + 4", "((1 + (2 + 3)) + 4)"),
        ("(5 + 5) * 2", "((5 + 5) * 2)"),
        ("-(5 + 5)", "(-(5 + 5))"),
        ("a + add(b * c) + d", "((a + add((b * c))) + d)"),
        (
            "add(a,b,1,2 * 3,4 + 5,add(6,7 * 8))",
            "add(a, b, 1, (2 * 3), (4 + 5), add(6, (7 * 8)))",
        ),
    ],
)
def test_operator_precedence(source, expected):
    assert str(parse(source)) == expected


@pytest.mark.parametrize("source, value", [("true;", True), ("false;", False)])
def test_boolean_expression(source, value):
    exp = _single_expression(source)
    assert isinstance(exp, Boolean)
    assert exp.value is value


def test_if_expression():
    exp = _single_expression("if (x < y) { x }")
    assert isinstance(exp, IfExpression)
    _check_infix(exp.condition, "x", "<", "y")
    assert len(exp.consequence.statements) == 1
    consequence = exp.consequence.statements[0]
    assert isinstance(consequence, ExpressionStatement)
    _check_literal(consequence.expression, "x")
    assert exp.alternative is None


def test_if_else_expression():
    exp = _single_expression("if (x < y) { x } else { y }")
    assert isinstance(exp, IfExpression)
    _check_infix(exp.condition, "x", "<", "y")
    assert len(exp.consequence.statements) == 1
    _check_literal(exp.consequence.statements[0].expression, "x")
    assert len(exp.alternative.statements) == 1
    alternative = exp.alternative.statements[0]
    assert isinstance(alternative, ExpressionStatement)
    _check_literal(alternative.expression, "y")


def test_function_literal():
    function = _single_expression("fn(x,y) { x + y; }")
    assert isinstance(function, FunctionLiteral)
    assert len(function.parameters) == 2
    _check_literal(function.parameters[0], "x")
    _check_literal(function.parameters[1], "y")
    assert len(function.body.statements) == 1
    body = function.body.statements[0]
    assert isinstance(body, ExpressionStatement)
    _check_infix(body.expression, "x", "+", "y")


@pytest.mark.parametrize(
    "source, params",
    [("fn(){};", []), ("fn(x){};", ["x"]), ("fn(x,y,z){};", ["x", "y", "z"])],
)
def test_function_parameters(source, params):
    program = parse(source)
    function = program.statements[0].expression
    assert isinstance(function, FunctionLiteral)
    assert [p.value for p in function.parameters] == params


def test_call_expression():
    exp = _single_expression("add(1,2*3,4+5);")
    assert isinstance(exp, CallExpression)
    _check_literal(exp.function, "add")
    assert len(exp.arguments) == 3
    _check_literal(exp.arguments[0], 1)
    _check_infix(exp.arguments[1], 2, "*", 3)
    _check_infix(exp.arguments[2], 4, "+", 5)


@pytest.mark.parametrize(
    "source, args",
    [
        ("add();", []),
        ("add(1);", ["1"]),
        ("add(1, 2 * 3, 4 + 5);", ["1", "(2 * 3)", "(4 + 5)"]),
    ],
)
def test_call_arguments(source, args):
    exp = parse(source).statements[0].expression
    assert isinstance(exp, CallExpression)
    _check_literal(exp.function, "add")
    assert [str(a) for a in exp.arguments] == args


def test_string_literal():
    exp = parse('"hello world";').statements[0].expression
    assert isinstance(exp, StringLiteral)
    assert exp.value == "hello world"


def test_missing_identifier_in_let():
    with pytest.raises(ParseError) as info:
        parse("let = 5;")
    assert "expected next token to be IDENT, got = instead" in info.value.errors


def test_missing_prefix_function():
    with pytest.raises(ParseError) as info:
        parse("let x = ;")
    assert info.value.errors == ["no prefix parse function for ; found"]


def test_integer_out_of_range():
    with pytest.raises(ParseError) as info:
        parse("99999999999999999999")
    assert info.value.errors == ['could not parse "99999999999999999999" as integer']


def test_leading_zero_is_octal():
    assert _single_expression("010").value == 8
    with pytest.raises(ParseError):
        parse("09")


def test_parser_collects_errors_without_raising():
    parser = Parser(Lexer("let 5;"))
    parser.parse_program()
    assert parser.errors[0] == "expected next token to be IDENT, got INT instead"


def test_precedence_order():
    assert Precedence.LOWEST < Precedence.EQUALS < Precedence.LESSGREATER < Precedence.SUM
    assert Precedence.SUM < Precedence.PRODUCT < Precedence.PREFIX < Precedence.CALL
    assert str(parse("-a(b) * c + d == e")) == "((((-a(b)) * c) + d) == e)"


def test_empty_program():
    program = parse("")
    assert program.statements == []
    assert program.token_literal() == ""