"""Reduction of letcalc terms to values (Num or Closure).

Bindings introduced by let and by application are reduced eagerly in the caller's environment, so that errors in the
bound expression abort the line. What gets bound afterwards depends on the strategy:

- "name": closures are bound as values (a lambda captures its environment once, when it is bound), every other result
  is discarded and the original term is bound as a Thunk, reduced again at each use in its defining environment.
- "value": the reduced value is bound.

Since letcalc has no side effects, both strategies produce the same results; "name" may repeat work.
"""

from letcalc.lang.error import EvalError
from letcalc.pure.environment import Environment, Thunk, Value
from letcalc.pure.lexical import parse
from letcalc.pure.term import Application, Closure, Lambda, Let, Num, Var


class Reducer:
    """Reduces terms with the given binding strategy. Stateless between calls."""
    STRATEGIES = ("name", "value")

    def __init__(self, strategy="name"):
        if strategy not in Reducer.STRATEGIES:
            raise ValueError(f"unknown strategy '{strategy}', expected one of {Reducer.STRATEGIES}")
        self.strategy = strategy

    def reduce(self, term, env=None):
        """Returns the value of term in env (empty if None). Raises EvalError if term cannot be reduced."""
        if env is None:
            env = Environment.empty()

        if isinstance(term, Num):
            return term

        elif isinstance(term, Var):
            try:
                binding = env.lookup(term.name)
            except KeyError:
                raise EvalError(f"Variable not found: '{term.name}'") from None
            return self.force(binding)

        elif isinstance(term, Application):
            function = self.reduce(term.function, env)
            return self.apply(function, term.argument, env)

        elif isinstance(term, Let):
            return self.reduce(term.body, env.extend(term.name, self.bind(term.bound, env)))

        elif isinstance(term, Lambda):
            return Closure(term, env)

        raise TypeError(f"cannot reduce {term!r}")

    def apply(self, function, argument, env):
        """Applies function (a reduced value) to the unreduced argument term, which is reduced in env."""
        if isinstance(function, Lambda):
            raise EvalError("No environment")
        if not isinstance(function, Closure):
            raise EvalError("Cannot apply to non-lambda")

        binding = self.bind(argument, env)
        return self.reduce(function.body, function.env.extend(function.parameter, binding))

    def bind(self, term, env):
        """Reduces term in env and returns the binding for it."""
        value = self.reduce(term, env)
        if self.strategy == "value" or isinstance(value, Closure):
            return Value(value)
        return Thunk(term, env)

    def force(self, binding):
        if isinstance(binding, Thunk):
            return self.reduce(binding.term, binding.env)
        return binding.value


def evaluate(text, strategy="name"):
    """Parses and reduces a single line in an empty environment."""
    return Reducer(strategy).reduce(parse(text))
