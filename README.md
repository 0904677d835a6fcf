# onelex

onelex is a lexer for a small scripting language. It turns source text into a
stream of tokens. Each token has a type, a piece of text (its lexeme) and a
line number.

The language has:

- keywords: `VAR`, `PRINT`, `IF`, `ELSE`, `FN`, `RET`, `NIL`, `TRUE`, `FALSE`
  (any word that begins with `FN` is read as the `FN` keyword)
- numbers, such as `42` and `3.14`
- strings in double quotes, which may span lines
- identifiers made of ASCII letters, digits and `_`, starting with a letter or `_`
- operators: `+ - * / ! = == > >= < <= <> || &&`
- punctuation: `( ) [ ] , .`
- line comments, which start with `#`
- block comments, written as `#> ... <#`

A NUL character ends the input, just as the end of the text does.

## Installation

```
pip install .
```

## Command line

```
onelex path/to/program.101d [more files ...]
```

The command prints one line per token for each file it is given:

```
TOK [<type number>][L:<line>][<text>]
```

Files are read as UTF-8; bytes that are not valid UTF-8 are replaced. Output
for a file stops after the end-of-file token, or after the first error token.
If a file cannot be read, the command reports it on standard error and goes on
with the next file. Run with no files, it prints an error and exits with
status 1.

## Library use

```python
from onelex.lexer import Lexer, TokenType, tokenize

for tok in tokenize("VAR a = 4"):
    print(tok.type.name, tok.lexeme, tok.line)

lexer = Lexer("IF (a <> b) [\nPRINT a\n]")
first = lexer.scan()
assert first.type is TokenType.IF
```

- `TokenType` is an `IntEnum`; its values are the type numbers the command
  prints.
- `Token` is a frozen dataclass with the fields `type`, `lexeme` and `line`.
- `Lexer.scan()` returns the next token. Once the input runs out, it returns an
  end-of-file token on every further call. `Lexer.line` holds the current line.
- Iterating over a `Lexer` yields tokens up to and including the end-of-file
  token. Error tokens are yielded along the way and scanning goes on after them.
- `tokenize(source)` gives the same tokens as a list.

The lexer does not raise on bad input. An unterminated string or an unexpected
character comes back as a token of type `TokenType.ERROR`, and the token's
lexeme holds the error message.

## What it does not do

onelex only tokenizes. It does not parse or run programs in the language.

## Tests

```
pip install ".[test]"
pytest
```