"""letcalc: a line-oriented evaluator for the untyped lambda calculus with integer literals and let bindings.

Program flow for every input line:
    1. Parser: produces a syntax tree by recursive descent over the line (see letcalc/pure/lexical.py)
        - Fails with a ParseError (message + position) on malformed input, nothing is evaluated then
    2. Reducer: reduces the tree to a value (a Num or a Closure) in a fresh, empty environment
        - Fails with an EvalError on unbound variables or when applying something that is not a lambda
    3. Output: the printed form of the value, or 'error' if reduction failed

"""
