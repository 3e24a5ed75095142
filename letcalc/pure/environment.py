"""Environments map names to bindings. They are immutable: extending an environment returns a new frame that refers to
its parent, so a closure captures its defining context simply by keeping a reference, and nothing has to be removed
again once a let body or lambda body has been reduced.
"""


class Value:
    """Binding to an already reduced value (Num or Closure)."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Value({self.value!r})"


class Thunk:
    """Binding to an unreduced term and the environment it was defined in. Reduced again at every use."""

    def __init__(self, term, env):
        self.term = term
        self.env = env

    def __repr__(self):
        return f"Thunk({self.term!r})"


class Environment:
    """Linked frames, innermost first. Lookup returns the innermost binding, so later bindings shadow earlier ones."""

    def __init__(self, name=None, binding=None, parent=None):
        self.name = name
        self.binding = binding
        self.parent = parent

    @classmethod
    def empty(cls):
        return cls()

    @property
    def is_empty(self):
        return self.parent is None

    def extend(self, name, binding):
        """Returns a new environment with name bound to binding on top of self."""
        return Environment(name, binding, self)

    def lookup(self, name):
        """Returns the innermost binding of name. Raises KeyError if name is unbound."""
        env = self
        while not env.is_empty:
            if env.name == name:
                return env.binding
            env = env.parent
        raise KeyError(name)

    def names(self):
        """Bound names, innermost first (shadowed names appear more than once)."""
        names = []
        env = self
        while not env.is_empty:
            names.append(env.name)
            env = env.parent
        return names

    def __contains__(self, name):
        return name in self.names()

    def __len__(self):
        return len(self.names())

    def __repr__(self):
        return f"Environment({self.names()})"
