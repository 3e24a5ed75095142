"""Position-tracking cursor over a single line of letcalc source. There is no separate tokenization pass: the parser
asks the scanner to classify and consume characters directly, and whitespace is skipped after every successful match.
"""

from letcalc.lang.error import ParseError

WHITESPACE = " \t\r\n"


def is_digit(char):
    """ASCII digits only."""
    return len(char) == 1 and "0" <= char <= "9"


def is_name_char(char):
    """ASCII letters only: digits, underscores etc. are not legal in identifiers."""
    return len(char) == 1 and ("a" <= char <= "z" or "A" <= char <= "Z")


class Scanner:
    """Cursor over text. pos is the 0-based offset of the next unconsumed character."""

    def __init__(self, text):
        self.text = text
        self.pos = 0

    def peek(self):
        """Returns the current character, or "" at end of input."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self):
        self.pos += 1

    def finished(self):
        return self.pos >= len(self.text)

    def skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def match(self, literal):
        """Consumes literal (and any whitespace after it) if it is next in the input."""
        if not self.text.startswith(literal, self.pos):
            return False
        self.pos += len(literal)
        self.skip_space()
        return True

    def match_word(self, word, advance=True):
        """Like match, but word must not be immediately followed by a name character: 'letter' is not 'let'. If not
        advance, only checks whether word is next.
        """
        end = self.pos + len(word)
        if not self.text.startswith(word, self.pos) or is_name_char(self.text[end:end + 1]):
            return False
        if advance:
            self.pos = end
            self.skip_space()
        return True

    def read_number(self):
        start = self.pos
        while is_digit(self.peek()):
            self.advance()
        try:
            number = int(self.text[start:self.pos])
        except ValueError:
            self.pos = start
            self.fail("Number too large")  # past the interpreter's int string conversion limit
        self.skip_space()
        return number

    def read_name(self):
        start = self.pos
        while is_name_char(self.peek()):
            self.advance()
        name = self.text[start:self.pos]
        self.skip_space()
        return name

    def fail(self, msg):
        """Aborts parsing of the whole line."""
        raise ParseError(msg, self.pos, self.text)

    def __repr__(self):
        return f"Scanner({self.text!r}, pos={self.pos})"
