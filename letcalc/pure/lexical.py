r"""Recursive-descent parser for letcalc lines. Character classification and whitespace skipping are interleaved with
parsing (see scanner.py), so there is no token stream.

```
<expr>        ::= <atom>+                            ; left-associated applications
<atom>        ::= <number> | "let" <let_body> | <name> | "(" <expr> ")" | "\" <lambda_body>
<let_body>    ::= <name> "=" <expr> "in" <expr>
<lambda_body> ::= <name> "->" <expr>
```

'let' and 'in' are reserved words. 'in' ends an expression only while a let is being parsed, otherwise it is an
ordinary name. Any malformed construct aborts the whole line with a ParseError: there is no recovery.
"""

from letcalc.pure.scanner import Scanner, is_digit, is_name_char
from letcalc.pure.term import Application, Lambda, Let, Num, Var


class Parser:
    """Parses a single line. Use parse() unless the scanner is needed afterwards."""

    def __init__(self, text):
        self.scanner = Scanner(text)
        self.let_depth = 0  # number of enclosing lets still waiting for 'in'

    def parse(self):
        """Parses the line. Leading whitespace is skipped; parsing stops at the first character that cannot start an atom
        and anything from there on is ignored.
        """
        self.scanner.skip_space()
        return self.parse_expr()

    def parse_expr(self):
        scanner = self.scanner
        term = None

        while not scanner.finished():
            char = scanner.peek()
            if is_digit(char):
                atom = Num(scanner.read_number())
            elif is_name_char(char):
                if scanner.match_word("let"):
                    atom = self.parse_let()
                elif self.let_depth and scanner.match_word("in", advance=False):
                    break  # left for the enclosing let
                else:
                    atom = Var(scanner.read_name())
            elif scanner.match("("):
                atom = self.parse_bracket()
            elif scanner.match("\\"):
                atom = self.parse_lambda()
            else:
                break

            term = atom if term is None else Application(term, atom)

        if term is None:
            scanner.fail("Expected expression")
        return term

    def parse_bracket(self):
        term = self.parse_expr()
        if not self.scanner.match(")"):
            self.scanner.fail("Expected ')'")
        return term

    def parse_let(self):
        scanner = self.scanner
        if not is_name_char(scanner.peek()):
            scanner.fail("Let expected identifier")
        name = scanner.read_name()
        if not scanner.match("="):
            scanner.fail("Let expected '='")

        self.let_depth += 1
        try:
            bound = self.parse_expr()
            if not scanner.match_word("in"):
                scanner.fail("Let expected in")
            body = self.parse_expr()
        finally:
            self.let_depth -= 1

        return Let(name, bound, body)

    def parse_lambda(self):
        scanner = self.scanner
        if not is_name_char(scanner.peek()):
            scanner.fail("Lambda expected identifier")
        parameter = scanner.read_name()
        if not scanner.match("->"):
            scanner.fail("Lambda expected '->'")
        return Lambda(parameter, self.parse_expr())


def parse(text):
    """Returns the Term for text. Raises ParseError (with the failing position) if text is malformed."""
    return Parser(text).parse()
