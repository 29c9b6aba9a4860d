from schemer.config import configure_logging, get_pprint_options
from schemer.debug_utils.pprint import pprint_expr
from schemer.errors import SchemerError, UnboundIdentifier, ArityMismatch, NoMatchingClause
from schemer.evaluation.evaluator import evaluate
from schemer.fixed_point import call

LENGTH = [
    "lambda", ["length"],
    ["lambda", ["l"],
        ["cond", [["isEmpty", "l"], 0],
                 ["else", ["addOne", ["length", ["tail", "l"]]]]]],
]

programs = [
    (1, 1),
    (True, True),
    (["quote", 1], 1),
    (["quote", [1, 2]], [1, 2]),
    (["quote", ["addOne", 1]], ["addOne", 1]),
    (["addOne", 41], 42),
    (["subOne", 1], 0),
    (["cons", 1, ["quote", [2, 3]]], [1, 2, 3]),
    (["cons", 1, []], [1]),
    (["head", ["quote", [1, 2, 3]]], 1),
    (["tail", ["quote", [1, 2, 3]]], [2, 3]),
    (["isEmpty", ["quote", []]], True),
    (["isEqual", ["quote", [1, 2]], ["quote", [1, 2]]], False),
    ([["lambda", ["x"], ["addOne", "x"]], 41], 42),
    ([["lambda", ["a", "b"], ["cons", "a", "b"]], 1, []], [1]),
    (["cond", [["isEqual", 1, 2], "a"], ["else", ["quote", "b"]]], "b"),
    (call(LENGTH, ["quote", [1, 2, 3, 4, 5]]), 5),
    ("x", UnboundIdentifier),
    ([["lambda", ["x", "y"], "x"], 1], ArityMismatch),
    (["cond", [False, 1]], NoMatchingClause),
]


def main():
    configure_logging()
    options = get_pprint_options()

    for program, expected in programs:
        print(pprint_expr(program, options=options))
        try:
            result = evaluate(program)
        except SchemerError as e:
            print(e.describe())
            assert isinstance(expected, type) and isinstance(e, expected), \
                f"Test failed: {program} raised {e!r}, expected {expected}"
            continue
        print("=>", pprint_expr(result, options=options))
        assert result == expected, f"Test failed: {program} => {result}, expected {expected}"


if __name__ == "__main__":
    main()
