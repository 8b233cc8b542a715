import operator

import pytest

from minipy.environment import Environment
from minipy.nodes import (
    AssignNode,
    BinOpNode,
    IfNode,
    Operation,
    ValueNode,
    VarNode,
)
from minipy.value import InterpreterError, Value


def lit(data):
    return ValueNode(Value(data))


def binop(left, op, right):
    return BinOpNode(lit(left), op, lit(right))


@pytest.fixture
def env():
    return Environment()


def test_value_node_eval_returns_its_value(env):
    value = Value("hello")
    assert ValueNode(value).eval(env) is value


@pytest.mark.parametrize(
    "data, text",
    [(True, "True"), (False, "False"), (42, "42"), (2.5, "2.5"), ("abc", "'abc'")],
)
def test_value_node_str(data, text):
    assert str(lit(data)) == text


def test_value_node_str_unknown_type():
    assert str(lit([1, 2])) == "<Unknown type of value>"


def test_addition_gives_float(env):
    result = binop(2, "+", 3).eval(env)
    assert result.data == 2 + 3
    assert isinstance(result.data, float)


@pytest.mark.parametrize("op", ["-", "*", "/"])
def test_arithmetic_matches_float_arithmetic(env, op):
    funcs = {"-": operator.sub, "*": operator.mul, "/": operator.truediv}
    result = binop(7, op, 2.5).eval(env)
    assert result.data == funcs[op](7.0, 2.5)


def test_power(env):
    assert binop(2, "**", 10).eval(env).data == 2.0 ** 10


@pytest.mark.parametrize("op", ["/", "%", "//"])
def test_division_by_zero(env, op):
    with pytest.raises(InterpreterError, match="Division by zero"):
        binop(5, op, 0).eval(env)


def test_modulo_truncates_towards_zero(env):
    result = binop(-7, "%", 2).eval(env)
    assert result == Value(-1)


def test_int_divide_truncates_towards_zero(env):
    result = binop(-7, "//", 2).eval(env)
    assert result == Value(-3)


@pytest.mark.parametrize(
    "op, func",
    [
        ("==", operator.eq),
        ("!=", operator.ne),
        ("<", operator.lt),
        ("<=", operator.le),
        (">", operator.gt),
        (">=", operator.ge),
    ],
)
@pytest.mark.parametrize("a, b", [(1, 2), (2, 2), (3.5, 1)])
def test_numeric_comparisons(env, op, func, a, b):
    assert binop(a, op, b).eval(env) == Value(func(a, b))


@pytest.mark.parametrize(
    "op, func",
    [
        ("==", operator.eq),
        ("!=", operator.ne),
        ("<", operator.lt),
        ("<=", operator.le),
        (">", operator.gt),
        (">=", operator.ge),
    ],
)
@pytest.mark.parametrize("a, b", [("abc", "abd"), ("x", "x"), ("b", "a")])
def test_string_comparisons(env, op, func, a, b):
    assert binop(a, op, b).eval(env) == Value(func(a, b))


def test_string_concatenation(env):
    assert binop("foo", "+", "bar").eval(env) == Value("foo" + "bar")


def test_string_subtraction_unsupported(env):
    with pytest.raises(InterpreterError, match="Unsupported operation: -"):
        binop("foo", "-", "bar").eval(env)


def test_repeat_string_either_side(env):
    assert binop("ab", "*", 3).eval(env) == Value("ab" * 3)
    assert binop(3, "*", "ab").eval(env) == binop("ab", "*", 3).eval(env)


def test_repeat_negative_count_is_empty(env):
    assert binop("ab", "*", -2).eval(env) == Value("")


def test_int_plus_string_unsupported(env):
    with pytest.raises(InterpreterError, match="Unsupported operation: \\+"):
        binop(1, "+", "a").eval(env)


def test_float_times_string_unsupported(env):
    with pytest.raises(InterpreterError, match="in eval"):
        binop(1.5, "*", "a").eval(env)


def test_bool_operand_unsupported(env):
    with pytest.raises(InterpreterError, match="Unsupported operation: \\+ in eval"):
        binop(True, "+", 1).eval(env)


def test_unknown_operator(env):
    with pytest.raises(InterpreterError, match="Unsupported operation: @"):
        binop(1, "@", 2).eval(env)


def test_operation_lookup_by_symbol():
    assert Operation.from_symbol("**") is Operation.POWER
    with pytest.raises(InterpreterError):
        Operation.from_symbol("=")


def test_binop_str():
    node = BinOpNode(lit(1), "+", VarNode("x"))
    assert str(node) == "(1 + x)"


def test_nested_binop_uses_variables(env):
    env["x"] = Value(4)
    node = BinOpNode(VarNode("x"), "*", BinOpNode(lit(1), "+", VarNode("x")))
    assert node.eval(env).data == 4.0 * (1 + 4)


def test_var_node(env):
    env["name"] = Value("v")
    assert VarNode("name").eval(env) == Value("v")
    assert str(VarNode("name")) == "name"


def test_var_node_undefined(env):
    with pytest.raises(InterpreterError, match="Undefined variable: missing"):
        VarNode("missing").eval(env)


def test_assign_sets_and_returns(env):
    node = AssignNode("x", lit(5))
    assert node.eval(env) == Value(5)
    assert env["x"] == Value(5)
    assert str(node) == "x = 5"


def _if_node():
    return IfNode(
        VarNode("a"),
        [AssignNode("r", lit("first"))],
        [(VarNode("b"), [AssignNode("r", lit("second"))])],
        [AssignNode("r", lit("third"))],
    )


@pytest.mark.parametrize(
    "a, b, expected",
    [(1, 0, "first"), (0, 1, "second"), (0, 0, "third"), (1, 1, "first")],
)
def test_if_branches(env, a, b, expected):
    env["a"] = Value(a)
    env["b"] = Value(b)
    result = _if_node().eval(env)
    assert result == Value(expected)
    assert env["r"] == Value(expected)


def test_if_without_match_returns_default(env):
    node = IfNode(lit(False), [AssignNode("r", lit(1))])
    assert node.eval(env) == Value()
    assert "r" not in env


def test_if_returns_last_statement(env):
    node = IfNode(lit(True), [AssignNode("p", lit(1)), AssignNode("q", lit("z"))])
    assert node.eval(env) == Value("z")
    assert env["p"] == Value(1)


def test_if_str():
    expected = (
        "if a:\n"
        "    r = 'first'\n"
        "elif b:\n"
        "    r = 'second'\n"
        "else:\n"
        "    r = 'third'\n"
    )
    assert str(_if_node()) == expected