import pytest

from sprig.evaluation.evaluator import evaluate, evaluate_operand, resolve
from sprig.reader.parser import read
from sprig.types.errors import (
    AttemptedToUseFunctionAsVariable,
    EmptyListExpression,
    FunctionNotDefined,
    IndexOutOfBounds,
    InvalidNumberOfArguments,
    MalformedNumber,
    MissingClosingParenthesis,
    NotAnIdentifier,
    UnexpectedClosingParenthesis,
    UnexpectedEndOfTokenStream,
    UnexpectedType,
    VariableNotDefined,
)
from sprig.types.lambda_fn import Lambda
from sprig.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42.0),
        ('"hi"', "hi"),
        ("true", True),
        ("foo", Symbol("foo")),
        ("(+ 1 2 3)", 6.0),
        ("(- 10 2 3)", 5.0),
        ("(* 2 3 4)", 24.0),
        ("(/ 5 2)", 2.5),
        ("(% 7 4)", 3.0),
        ("(- 7)", 7.0),
        ("(+ (* 2 3) (- 10 4))", 12.0),
        ('(+ true "5")', 6.0),
        ('(+ " 2.5 " 1)', 3.5),
        ('(concat "foo" 1 true)', "foo1true"),
        ('(concat "a" (concat "b" "c"))', "abc"),
        ("(concat 2.5 0.5)", "2.50.5"),
        ("(== 4 4)", True),
        ('(== 4 "4")', False),
        ("(== 1 1 2)", False),
        ("(== (quote (1 2)) (quote (1 2)))", True),
        ('(= 4 "4")', True),
        ("(= 1 true)", True),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(>= 3 3 1)", True),
        ("(> 10 8)", True),
        ("(<= 3 3.1)", True),
        ('(and true 1 "true")', True),
        ("(and true false true)", False),
        ('(or false 0 "")', False),
        ("(or false 0 1)", True),
        ('(if (> 2 1) "yes" "no")', "yes"),
        ('(if 0 "yes" "no")', "no"),
        ("(nth 1 (quote (10 20 30)))", 20.0),
        ("(nth 1.9 (quote (10 20 30)))", 20.0),
        ('(nth "0" (quote (a b)))', Symbol("a")),
        ("(append 3 (quote (1 2)))", [1.0, 2.0, 3.0]),
        ("(append (quote (x)) (quote ()))", [[Symbol("x")]]),
        ("(quote a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(quote (+ 1 2))", [Symbol("+"), 1.0, 2.0]),
        ("(quote x)", Symbol("x")),
        ("(quote)", []),
        ("(def x 5)", 5.0),
        ("(def greeting (concat \"hello \" \"world\"))", "hello world"),
    ]
)
def test_evaluate(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(", MissingClosingParenthesis),
        (")", UnexpectedClosingParenthesis),
        ("(+ 1 2))", UnexpectedClosingParenthesis),
        ("", UnexpectedEndOfTokenStream),
        ("   ", UnexpectedEndOfTokenStream),
        ("1.2.3", MalformedNumber),
        ("()", EmptyListExpression),
        ("(1 2)", NotAnIdentifier),
        ('("f" 2)', NotAnIdentifier),
        ("((func (x) x) 1)", NotAnIdentifier),
        ("(foo 1)", FunctionNotDefined),
        ("(+ x 1)", VariableNotDefined),
        ("(+ + 1)", AttemptedToUseFunctionAsVariable),
        ("(+)", InvalidNumberOfArguments),
        ("(concat)", InvalidNumberOfArguments),
        ('(+ true "foo")', UnexpectedType),
        ("(+ (quote (1)) 1)", UnexpectedType),
        ("(nth 5 (quote (10 20)))", IndexOutOfBounds),
        ("(nth -1 (quote (10 20)))", VariableNotDefined),
        ("(nth (- 0 1) (quote (10 20)))", IndexOutOfBounds),
        ("(nth 0 5)", UnexpectedType),
        ("(+ (quote x) 1)", VariableNotDefined),
        ("(concat (nth 0 (quote (+))))", AttemptedToUseFunctionAsVariable),
        ("(append 1 2 3)", InvalidNumberOfArguments),
        ("(def 1 2)", NotAnIdentifier),
        ("(def x)", InvalidNumberOfArguments),
        ("(def x 1 2)", InvalidNumberOfArguments),
        ("(def x y)", VariableNotDefined),
        ("(def f +)", AttemptedToUseFunctionAsVariable),
        ("(func x (+ x 1))", UnexpectedType),
        ("(func (x 1) x)", UnexpectedType),
        ("(func (x))", InvalidNumberOfArguments),
        ("(if true 1)", InvalidNumberOfArguments),
        ('(if "maybe" 1 2)', UnexpectedType),
        ("(exit 1 2)", InvalidNumberOfArguments),
    ]
)
def test_evaluate_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_error_payloads(interp):
    with pytest.raises(VariableNotDefined) as excinfo:
        interp.eval("(+ x 1)")
    assert excinfo.value == VariableNotDefined("x")
    assert excinfo.value.name == "x"

    with pytest.raises(FunctionNotDefined) as excinfo:
        interp.eval("(frobnicate 1 2)")
    assert excinfo.value.name == "frobnicate"

    with pytest.raises(IndexOutOfBounds) as excinfo:
        interp.eval("(nth 5 (quote (10 20)))")
    assert excinfo.value.index == 5


def test_operands_fail_left_to_right(interp):
    # The first failing operand decides the error.
    with pytest.raises(VariableNotDefined):
        interp.eval("(+ x (foo))")
    with pytest.raises(FunctionNotDefined):
        interp.eval("(+ (foo) x)")


def test_def_overwrites_and_is_visible(interp):
    interp.eval("(def x 1)")
    interp.eval("(def x (+ x 1))")
    assert interp.eval("(+ x 0)") == 2.0


def test_def_copies_value_of_identifier(interp):
    interp.eval("(def x 1)")
    assert interp.eval("(def y x)") == 1.0
    assert interp.env.get("y") == 1.0


def test_bound_literal_used_as_operator(interp):
    interp.eval("(def x 5)")
    with pytest.raises(UnexpectedType):
        interp.eval("(x 1)")


def test_special_forms_cannot_be_shadowed(interp):
    interp.eval("(def quote 1)")
    assert interp.eval("(quote a)") == Symbol("a")


def test_computed_identifiers_resolve_as_operands(interp):
    interp.eval("(def x 5)")
    interp.eval("(def names (quote (x +)))")
    assert interp.eval("(+ (quote x) 1)") == 6.0
    assert interp.eval("(+ (nth 0 names) 1)") == 6.0
    assert interp.eval("(def y (quote x))") == 5.0
    # Top-level results are returned as they are.
    assert interp.eval("(nth 0 names)") == Symbol("x")

    with pytest.raises(VariableNotDefined) as excinfo:
        interp.eval("(append (quote z) (quote ()))")
    assert excinfo.value.name == "z"
    with pytest.raises(AttemptedToUseFunctionAsVariable):
        interp.eval("(concat (nth 1 names))")


def test_quoted_lists_are_not_resolved(interp):
    # Only a bare identifier result is looked up, never the elements of a list.
    assert interp.eval("(append (quote (z)) (quote ()))") == [[Symbol("z")]]


def test_append_leaves_original_untouched(interp):
    interp.eval("(def xs (quote (1 2)))")
    assert interp.eval("(append 3 xs)") == [1.0, 2.0, 3.0]
    assert interp.env.get("xs") == [1.0, 2.0]
    assert interp.eval("(== xs (quote (1 2)))") is True


def test_bare_identifier_is_not_looked_up(env):
    env.define("x", 10.0)
    assert evaluate(Symbol("x"), env) == Symbol("x")
    assert evaluate_operand(Symbol("x"), env) == 10.0


def test_resolve(env):
    env.define("x", [1.0])
    assert resolve(Symbol("x"), env) == [1.0]
    with pytest.raises(AttemptedToUseFunctionAsVariable):
        resolve(Symbol("nth"), env)
    with pytest.raises(VariableNotDefined):
        resolve(Symbol("nope"), env)


def test_evaluate_rejects_runtime_values(env):
    with pytest.raises(UnexpectedType):
        evaluate(Lambda(["x"], Symbol("x")), env)


def test_evaluate_parsed_tree(env):
    assert evaluate(read("(+ 4 5 (+ 10 5))"), env) == 24.0
