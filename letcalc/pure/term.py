r"""Abstract syntax tree for letcalc. The same node types double as runtime values: a reduced expression is either a Num
or a Closure (a Lambda paired with the environment it captured).

```
<term> ::= <number>                          ; Num
         | <name>                            ; Var
         | <term> <term>                     ; Application, associating by left: a b c = ((a b) c)
         | "let" <name> "=" <term> "in" <term>  ; Let
         | "\" <name> "->" <term>            ; Lambda, body is greedy: \x -> x y = \x -> (x y)
```
"""

from abc import ABC, abstractmethod


class Term(ABC):
    """Superclass of every letcalc expression node. Nodes are not modified after parsing."""

    @property
    def _cls(self):
        return type(self).__name__

    @property
    @abstractmethod
    def nodes(self):
        """Child terms, left to right."""

    @property
    @abstractmethod
    def label(self):
        """Short description of this node used by display."""

    def display(self, indents=0):
        """Recursively displays the tree in a readable format.

        Format:
        <Term>(<label>, nodes=[
            <Term>(<label>)  # <-- if nodes is empty
        ])
        """
        result = f"{'    ' * indents}{self._cls}({self.label}"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __eq__(self, other):
        return type(other) is type(self) and vars(other) == vars(self)

    def __hash__(self):
        return hash((self._cls, str(self)))


class Num(Term):
    """Integer literal. Already a value."""

    def __init__(self, value):
        self.value = value

    @property
    def nodes(self):
        return []

    @property
    def label(self):
        return str(self.value)

    def __repr__(self):
        return f"Num({self.value})"

    def __str__(self):
        return str(self.value)


class Var(Term):

    def __init__(self, name):
        self.name = name

    @property
    def nodes(self):
        return []

    @property
    def label(self):
        return f"'{self.name}'"

    def __repr__(self):
        return f"Var('{self.name}')"

    def __str__(self):
        return self.name


class Application(Term):

    def __init__(self, function, argument):
        self.function = function
        self.argument = argument

    @property
    def nodes(self):
        return [self.function, self.argument]

    @property
    def label(self):
        return f"'{self}'"

    def __repr__(self):
        return f"Application({self.function!r}, {self.argument!r})"

    def __str__(self):
        return f"({self.function} {self.argument})"


class Let(Term):
    """let name = bound in body. name is only visible in body."""

    def __init__(self, name, bound, body):
        self.name = name
        self.bound = bound
        self.body = body

    @property
    def nodes(self):
        return [self.bound, self.body]

    @property
    def label(self):
        return f"name='{self.name}'"

    def __repr__(self):
        return f"Let('{self.name}', {self.bound!r}, {self.body!r})"

    def __str__(self):
        return f"(let {self.name} = {self.bound} in {self.body})"


class Lambda(Term):
    """A lambda that has not captured an environment yet. Reducing it produces a Closure."""

    def __init__(self, parameter, body):
        self.parameter = parameter
        self.body = body

    @property
    def nodes(self):
        return [self.body]

    @property
    def label(self):
        return f"parameter='{self.parameter}'"

    def __repr__(self):
        return f"Lambda('{self.parameter}', {self.body!r})"

    def __str__(self):
        return f"(\\{self.parameter} -> {self.body})"


class Closure:
    """A Lambda together with the environment captured when it was reduced. Prints as its lambda."""

    def __init__(self, function, env):
        self.function = function
        self.env = env

    @property
    def parameter(self):
        return self.function.parameter

    @property
    def body(self):
        return self.function.body

    def __eq__(self, other):
        return isinstance(other, Closure) and self.function == other.function and self.env is other.env

    def __hash__(self):
        return hash((self.function, id(self.env)))

    def __repr__(self):
        return f"Closure({self.function!r}, env={self.env!r})"

    def __str__(self):
        return str(self.function)
