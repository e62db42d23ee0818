import pytest

from sprig.types.errors import (
    AttemptedToUseFunctionAsVariable,
    InvalidNumberOfArguments,
    SprigRecursionError,
    Terminate,
    VariableNotDefined,
)
from sprig.types.lambda_fn import Lambda
from sprig.types.symbol import Symbol


def test_func_builds_unevaluated_lambda(interp):
    lam = interp.eval("(func (a b) (+ a b))")
    assert isinstance(lam, Lambda)
    assert lam.params == ["a", "b"]
    assert lam.body == [Symbol("+"), Symbol("a"), Symbol("b")]


def test_define_and_call(interp):
    assert isinstance(interp.eval("(def add1 (func (n) (+ n 1)))"), Lambda)
    assert interp.eval("(add1 5)") == 6.0


@pytest.mark.parametrize("call", ["(add1 1 2)", "(add1)"])
def test_wrong_arity(interp, call):
    interp.eval("(def add1 (func (n) (+ n 1)))")
    with pytest.raises(InvalidNumberOfArguments):
        interp.eval(call)


def test_arity_checked_before_arguments(interp):
    interp.eval("(def add1 (func (n) (+ n 1)))")
    with pytest.raises(InvalidNumberOfArguments):
        interp.eval("(add1 undefined-a undefined-b)")


def test_zero_parameter_lambda(interp):
    interp.eval("(def answer (func () 42))")
    assert interp.eval("(answer)") == 42.0


def test_body_identifier_resolves_in_local_scope(interp):
    interp.eval("(def id (func (x) x))")
    assert interp.eval("(id 7)") == 7.0
    assert interp.eval("(+ (id 7) 1)") == 8.0


def test_arguments_evaluated_in_caller_scope(interp):
    interp.eval("(def n 10)")
    interp.eval("(def add1 (func (n) (+ n 1)))")
    assert interp.eval("(add1 (+ n 5))") == 16.0
    assert interp.eval("(add1 n)") == 11.0


def test_call_does_not_leak_bindings(interp):
    interp.eval("(def x 1)")
    interp.eval("(def f (func (y) (def x y)))")
    assert interp.eval("(f 5)") == 5.0
    assert interp.eval("(+ x 0)") == 1.0


def test_parameters_do_not_leak(interp):
    interp.eval("(def f (func (secret) secret))")
    interp.eval("(f 1)")
    with pytest.raises(VariableNotDefined):
        interp.eval("(+ secret 0)")


def test_parameter_shadows_global(interp):
    interp.eval("(def x 100)")
    interp.eval("(def f (func (x) (* x 2)))")
    assert interp.eval("(f 3)") == 6.0
    assert interp.eval("(+ x 0)") == 100.0


def test_lambda_sees_bindings_present_at_call_time(interp):
    # The environment is copied when the lambda is called, not when it is defined.
    interp.eval("(def f (func () (+ z 1)))")
    with pytest.raises(VariableNotDefined):
        interp.eval("(f)")
    interp.eval("(def z 41)")
    assert interp.eval("(f)") == 42.0


def test_higher_order_lambdas(interp):
    interp.eval("(def add1 (func (n) (+ n 1)))")
    interp.eval("(def twice (func (f x) (f (f x))))")
    assert interp.eval("(twice add1 3)") == 5.0


def test_builtins_cannot_be_passed_as_values(interp):
    interp.eval("(def twice (func (f x) (f (f x))))")
    with pytest.raises(AttemptedToUseFunctionAsVariable):
        interp.eval("(twice + 3)")


def test_recursion_with_lazy_if(interp):
    interp.eval("(def fact (func (n) (if (<= n 1) 1 (* n (fact (- n 1))))))")
    assert interp.eval("(fact 5)") == 120.0
    assert interp.eval("(fact 1)") == 1.0


def test_recursion_with_eager_if_never_bottoms_out(eager_interp):
    # Both branches are evaluated before the builtin `if` runs.
    eager_interp.eval("(def fact (func (n) (if (<= n 1) 1 (* n (fact (- n 1))))))")
    with pytest.raises(SprigRecursionError):
        eager_interp.eval("(fact 3)")


def test_lazy_if_skips_untaken_branch(interp):
    assert interp.eval("(if true 1 (exit 1))") == 1.0
    assert interp.eval("(if false (undefined) 2)") == 2.0


def test_eager_if_evaluates_both_branches(eager_interp):
    with pytest.raises(Terminate) as excinfo:
        eager_interp.eval("(if true 1 (exit 1))")
    assert excinfo.value.status == 1
    assert eager_interp.eval('(if false "a" "b")') == "b"


def test_eager_if_is_an_ordinary_builtin(eager_interp):
    with pytest.raises(InvalidNumberOfArguments):
        eager_interp.eval("(if true 1)")


def test_lambda_display(interp):
    assert str(interp.eval("(func (a) (+ a 1))")) == "λ (a) -> (+ a 1)"


def test_lambdas_compare_structurally(interp):
    interp.eval("(def f (func (a) (+ a 1)))")
    interp.eval("(def g (func (a) (+ a 1)))")
    interp.eval("(def h (func (b) (+ b 1)))")
    assert interp.eval("(== f g)") is True
    assert interp.eval("(== f h)") is False
