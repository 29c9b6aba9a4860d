import pytest

from schemer import evaluate
from schemer.builtins import PRIMITIVES, cons, head, tail, is_equal
from schemer.evaluation.apply import apply_primitive
from schemer.types.function import Primitive
from schemer import errors


def q(x):
    return ["quote", x]


@pytest.mark.parametrize(
    "expr,expected",
    [
        (["cons", 1, q([])], [1]),
        (["cons", q([0]), q([1])], [[0], 1]),
        (["head", q([1, 2, 3])], 1),
        (["head", q([[1], 2])], [1]),
        (["tail", q([1, 2, 3])], [2, 3]),
        (["tail", q([1])], []),
        (["tail", q([])], []),
        (["isEmpty", q([])], True),
        (["isEmpty", q([[]])], False),
        (["isEqual", 1, 1], True),
        (["isEqual", 1, 2], False),
        (["isEqual", 1, 1.0], True),
        (["isEqual", q("a"), q("a")], True),
        (["isEqual", q("a"), q("b")], False),
        (["isEqual", True, True], True),
        (["isEqual", 1, True], False),
        (["isEqual", 0, False], False),
        (["isEqual", q([]), q([])], False),
        (["isAtom", 1], True),
        (["isAtom", True], True),
        (["isAtom", q("a")], True),
        (["isAtom", "addOne"], True),
        (["isAtom", ["lambda", ["x"], "x"]], True),
        (["isAtom", q([])], False),
        (["isAtom", q([1])], False),
        (["isZero", 0], True),
        (["isZero", 0.0], True),
        (["isZero", 1], False),
        (["isZero", False], False),
        (["isZero", q("zero")], False),
        (["isZero", q([])], False),
        (["addOne", 0], 1),
        (["addOne", -1], 0),
        (["addOne", 1.5], 2.5),
        (["subOne", 0], -1),
        (["isNumber", 1], True),
        (["isNumber", 1.5], True),
        (["isNumber", True], False),
        (["isNumber", q("one")], False),
        (["isNumber", q([1])], False),
    ],
)
def test_primitive(expr, expected):
    result = evaluate(expr)
    assert result == expected
    assert type(result) is type(expected)


def test_is_equal_is_identity_for_lists():
    xs = [1, 2]
    assert is_equal([xs, xs])
    assert not is_equal([xs, [1, 2]])
    same = [["lambda", ["l"], ["isEqual", "l", "l"]], q([1, 2])]
    assert evaluate(same) is True


def test_is_equal_on_function_values():
    assert evaluate(["isEqual", "cons", "cons"]) is True
    assert evaluate(["isEqual", "cons", "head"]) is False
    closure = [["lambda", ["f"], ["isEqual", "f", "f"]], ["lambda", ["x"], "x"]]
    assert evaluate(closure) is True
    two = ["isEqual", ["lambda", ["x"], "x"], ["lambda", ["x"], "x"]]
    assert evaluate(two) is False


def test_cons_builds_new_list():
    rest = [2, 3]
    result = cons([1, rest])
    assert result == [1, 2, 3]
    assert rest == [2, 3]
    assert tail([result]) is not result


def test_cons_requires_list():
    with pytest.raises(errors.TypeMismatch):
        evaluate(["cons", 1, 2])


def test_is_empty_requires_list():
    with pytest.raises(errors.TypeMismatch):
        evaluate(["isEmpty", 1])


def test_head_of_empty_list():
    with pytest.raises(errors.EmptyListAccess):
        evaluate(["head", q([])])
    with pytest.raises(errors.EmptyListAccess):
        head([[]])


@pytest.mark.parametrize(
    "expr",
    [
        ["head", 1],
        ["tail", True],
        ["addOne", q("a")],
        ["subOne", q([1])],
        ["addOne", True],
    ],
)
def test_type_mismatch(expr):
    with pytest.raises(errors.TypeMismatch):
        evaluate(expr)


@pytest.mark.parametrize(
    "expr",
    [
        ["addOne"],
        ["addOne", 1, 2],
        ["cons", 1],
        ["isEqual", 1, 2, 3],
    ],
)
def test_primitive_arity(expr):
    with pytest.raises(errors.ArityMismatch):
        evaluate(expr)


def test_primitive_table_is_fixed():
    assert set(PRIMITIVES) == {
        "cons", "head", "tail", "isEmpty", "isEqual",
        "isAtom", "isZero", "addOne", "subOne", "isNumber",
    }
    with pytest.raises(TypeError):
        PRIMITIVES["car"] = PRIMITIVES["head"]


def test_unknown_primitive():
    with pytest.raises(errors.UnknownPrimitive):
        apply_primitive(Primitive("car"), [[1]])
