"""Expression builders for recursion through self-application.

A lambda cannot refer to itself by name, so a recursive function is written as
a *definition*: a one-argument lambda whose parameter stands for the function
being defined, returning the actual function, e.g.

    ["lambda", ["length"],
        ["lambda", ["l"],
            ["cond", [["isEmpty", "l"], 0],
                     ["else", ["addOne", ["length", ["tail", "l"]]]]]]]

`recursive(definition)` wraps it with the applicative-order Y combinator.
Nothing here touches the evaluator; the results are plain expressions.
"""

from __future__ import annotations

from schemer import Expression

# (lambda (f) (f f))
SELF_APPLY: Expression = ["lambda", ["f"], ["f", "f"]]


def y_combinator(arity: int = 1) -> Expression:
    """The applicative-order Y combinator for functions of `arity` arguments.

    (lambda (recur)
      ((lambda (f) (f f))
       (lambda (make) (recur (lambda (x0 ...) ((make make) x0 ...))))))

    The inner lambda delays (make make) until arguments arrive; without it the
    self-application would never terminate under eager evaluation.
    """
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")
    params = [f"x{i}" for i in range(arity)]
    delayed = ["lambda", params, [["make", "make"], *params]]
    return [
        "lambda", ["recur"],
        [SELF_APPLY, ["lambda", ["make"], ["recur", delayed]]],
    ]


Y: Expression = y_combinator(1)


def recursive(definition: Expression, arity: int = 1) -> Expression:
    """Expression evaluating to the fixed point of `definition`."""
    combinator = Y if arity == 1 else y_combinator(arity)
    return [combinator, definition]


def call(definition: Expression, *args: Expression) -> Expression:
    """Expression applying the recursive function built from `definition` to `args`."""
    return [recursive(definition, len(args)), *args]
