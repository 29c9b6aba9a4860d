import pytest

from schemer.types.environment import Environment


@pytest.fixture
def env():
    """A one-frame environment with a few bindings."""
    return Environment.empty().extend({"x": 42, "y": 100, "xs": [1, 2, 3]})


@pytest.fixture
def length_definition():
    # (lambda (length) (lambda (l) (cond ((isEmpty l) 0) (else (addOne (length (tail l)))))))
    return [
        "lambda", ["length"],
        ["lambda", ["l"],
            ["cond", [["isEmpty", "l"], 0],
                     ["else", ["addOne", ["length", ["tail", "l"]]]]]],
    ]
