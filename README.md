# monke

A lexer, a Pratt parser and an interactive read–parse–print loop for the
Monke programming language. Monke is a small expression language with integers,
strings, booleans, `let` bindings, `return`, `if`/`else`, first-class functions
and calls.

## What it does not do

Monke programs are tokenised and parsed here, but never run. There is no
evaluator: the REPL shows the syntax tree the parser built, written back as
source text, not the value of the expression.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The REPL

```
monke
```

The command greets the current user by name and then reads one line at a
time from standard input, showing the prompt `>>` before each. It parses
each line and prints the program back in its normalised form, with every
operator application in parentheses so you can see the precedence the parser
chose:

```
>>let x = 1 + 2 * 3;
let x = (1 + (2 * 3));
>>add(a, b * c) + d
(add(a, (b * c)) + d)
```

If a line does not parse, the REPL prints the parser errors instead:

```
>>let = 5;
Woops! We ran into some monkey business here!
 parser errors:
	expected next token to be IDENT, got = instead
	no prefix parse function for = found
```

End input (Ctrl-D, or Ctrl-Z then Enter on Windows) to leave.

To run the loop on your own streams, call
`monke.repl.start(stream_in, stream_out)`; it returns when `stream_in` has no
more lines.

## Using the library

### Tokens

`monke.tokens` holds the `TokenType` enum, the frozen `Token` dataclass
(`type` and `literal`) and `lookup_ident(ident)`, which returns the keyword
type for `fn`, `let`, `if`, `else`, `return`, `true` and `false`, and
`TokenType.IDENT` for anything else.

### Tokenising

```python
from monke.lexer import Lexer

for token in Lexer("let five = 5;"):
    print(token.type, token.literal)
```

Iterating a `Lexer` yields tokens up to and including the `EOF` token.
`Lexer.next_token()` returns one token at a time and keeps returning an `EOF`
token once the input is used up. Characters the language does not know come
out as `ILLEGAL` tokens. A string runs from `"` to the next `"`, with no
escapes.

### Parsing

```python
from monke.lexer import Lexer
from monke.parsing import Parser, ParseError, parse

program = parse("(5 + 5) * 2")
print(program)            # ((5 + 5) * 2)

parser = Parser(Lexer("let x 5;"))
program = parser.parse_program()
print(parser.errors)      # messages collected while parsing
```

`parse()` raises `ParseError` when the source has errors; the exception's
`errors` attribute holds the list of messages. `Parser.parse_program()`
collects the errors in `Parser.errors` instead of raising, so you can look at
a partial tree.

Integer literals must fit in a signed 64-bit integer; a literal with a leading
zero is read as octal. Operator binding power is given by the `Precedence`
enum in `monke.parsing`.

### Tracing

Pass a `monke.tracing.Tracer` to the parser to see its calls as nested
`BEGIN`/`END` lines, indented one tab per level:

```python
import sys
from monke.lexer import Lexer
from monke.parsing import Parser
from monke.tracing import Tracer

Parser(Lexer("1 + 2"), tracer=Tracer(sys.stderr)).parse_program()
```

A `Tracer` with no stream writes to standard output. Besides `trace(msg)` and
`untrace(msg)` it offers `span(msg)`, a context manager that traces the body
of a `with` block.

### The syntax tree

The nodes live in `monke.syntax`: `Program`, `LetStatement`,
`ReturnStatement`, `ExpressionStatement`, `BlockStatement`, `Identifier`,
`IntegerLiteral`, `StringLiteral`, `Boolean`, `PrefixExpression`,
`InfixExpression`, `IfExpression`, `FunctionLiteral` and `CallExpression`,
with the base classes `Node`, `Statement` and `Expression`. Every node has
`token_literal()`, and `str()` renders it back as source text.