import pytest

from schemer import evaluate
from schemer.types.function import Closure
from schemer.types.environment import Environment
from schemer import errors


def test_lambda_evaluates_to_closure():
    closure = evaluate(["lambda", ["a", "b"], ["cons", "a", "b"]])
    assert isinstance(closure, Closure)
    assert closure.formals == ("a", "b")
    assert closure.body == ["cons", "a", "b"]
    assert closure.env is Environment.empty()


def test_closure_body_is_not_evaluated_at_definition():
    # body refers to an unbound name; only applying it fails
    closure = evaluate(["lambda", ["x"], "nowhere"])
    assert isinstance(closure, Closure)
    with pytest.raises(errors.UnboundIdentifier):
        evaluate([closure, 1])


def test_lambda_simple():
    expr = [["lambda", ["a", "b"], ["cons", "a", "b"]], 1, ["quote", [2]]]
    assert evaluate(expr) == [1, 2]


def test_empty_list_argument_passes_through():
    expr = [["lambda", ["a", "b"], ["cons", "a", "b"]], 1, []]
    assert evaluate(expr) == [1]


def test_zero_argument_lambda():
    assert evaluate([["lambda", [], 7]]) == 7


def test_closure_captures_definition_environment():
    # ((lambda (x) ((lambda (f) ((lambda (x) (f 0)) 100)) (lambda (y) x))) 1)
    # Lexical scoping: f sees the x from its definition site (1), not the caller's (100)
    expr = [
        ["lambda", ["x"],
            [["lambda", ["f"],
                [["lambda", ["x"], ["f", 0]], 100]],
             ["lambda", ["y"], "x"]]],
        1,
    ]
    assert evaluate(expr) == 1


def test_curried_closures_keep_their_own_bindings():
    make_adder_pair = ["lambda", ["a"], ["lambda", ["b"], ["cons", "a", ["cons", "b", []]]]]
    first = evaluate([make_adder_pair, 1])
    second = evaluate([make_adder_pair, 2])
    assert evaluate([first, 10]) == [1, 10]
    assert evaluate([second, 20]) == [2, 20]
    assert evaluate([first, 30]) == [1, 30]


def test_inner_binding_shadows_outer():
    expr = [["lambda", ["x"], [["lambda", ["x"], ["addOne", "x"]], 10]], 1]
    assert evaluate(expr) == 11


def test_primitive_names_cannot_be_shadowed():
    # Classification treats a primitive name as a constant before any lookup
    expr = [["lambda", ["addOne"], ["addOne", 1]], ["lambda", ["n"], 0]]
    assert evaluate(expr) == 2


def test_primitive_passed_as_argument():
    expr = [["lambda", ["f", "v"], ["f", "v"]], "subOne", 10]
    assert evaluate(expr) == 9


def test_higher_order_result():
    compose = ["lambda", ["f", "g"], ["lambda", ["v"], ["f", ["g", "v"]]]]
    expr = [[compose, "addOne", "addOne"], 40]
    assert evaluate(expr) == 42


def test_function_position_can_be_any_expression():
    pick = ["cond", [["isZero", 0], "addOne"], ["else", "subOne"]]
    assert evaluate([pick, 1]) == 2


def test_arity_mismatch():
    with pytest.raises(errors.ArityMismatch):
        evaluate([["lambda", ["x", "y"], "x"], 1])
    with pytest.raises(errors.ArityMismatch):
        evaluate([["lambda", ["x"], "x"], 1, 2])


def test_no_named_recursion():
    # a lambda's body has no binding for a name it was never given
    loop = ["lambda", ["n"], ["loop", "n"]]
    with pytest.raises(errors.UnboundIdentifier):
        evaluate([loop, 1])


@pytest.mark.parametrize(
    "expr",
    [
        ["lambda", ["x"]],
        ["lambda", ["x"], "x", "x"],
        ["lambda", "x", "x"],
        ["lambda", [1], 1],
        ["lambda", [["x"]], "x"],
        ["lambda", ["x", "x"], "x"],
    ],
)
def test_malformed_lambda(expr):
    with pytest.raises(errors.InvalidSpecialForm):
        evaluate(expr)


@pytest.mark.parametrize("fn", [1, True, ["quote", [1]], ["quote", "a"]])
def test_not_callable(fn):
    with pytest.raises(errors.NotCallable):
        evaluate([fn, 1])


def test_closure_str():
    closure = evaluate(["lambda", ["a", "b"], ["cons", "a", "b"]])
    assert str(closure) == "(λ (a b) (cons a b))"
    assert repr(closure) == str(closure)
