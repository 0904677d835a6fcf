"""Command line entry point: prints the tokens of each given file."""

from __future__ import annotations

import sys

from onelex.lexer import Lexer, TokenType


def process_file(path, out=None):
    """Tokenize the file at ``path`` and write one line per token to ``out``.

    Output stops after the first EOF or error token. Raises OSError if the
    file cannot be read.
    """
    if out is None:
        out = sys.stdout
    with open(path, "rb") as handle:
        source = handle.read().decode("utf-8", errors="replace")

    for token in Lexer(source):
        print(f"TOK [{token.type.value}][L:{token.line}][{token.lexeme}]", file=out)
        if token.type is TokenType.ERROR:
            break


def main(argv=None):
    """Run the tokenizer over every path in ``argv``; return the exit status."""
    paths = sys.argv[1:] if argv is None else list(argv)
    if not paths:
        print("Error: Specify input files", file=sys.stderr)
        return 1

    for path in paths:
        try:
            process_file(path)
        except OSError:
            print(f"Could not open file [{path}]", file=sys.stderr)
            print(f"Error: Cannot process file [{path}]", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())