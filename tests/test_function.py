from dataclasses import dataclass

import pytest

from funckit import Function, FunckitConfig, set_config


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str = ""


class Account:
    def __init__(self, owner: str):
        self.owner = owner


def some(x):
    return x


def none(_):
    return None


def test_call_and_dunder_call():
    foo_has_prefix = Function("foo".startswith)
    assert foo_has_prefix.call("fo")
    assert foo_has_prefix("fo")
    assert not foo_has_prefix.call("bar")


def test_wrapping_a_function_reuses_it(increment):
    wrapped = Function(increment)
    assert Function(wrapped).call(1) == 2


def test_rejects_non_callable():
    with pytest.raises(TypeError):
        Function(42)


def test_identity():
    identity = Function.identity()
    for value in [-42, -1, 0, 1, 42, "x", None]:
        assert identity.call(value) == value


def test_constant_ignores_input():
    all_tens = list(map(Function.constant(10), range(1, 6)))
    assert all_tens == [10] * 5


def test_get_attribute():
    get_first = Function.get("first_name")
    assert get_first.call(Person("Michael")) == "Michael"


def test_get_dotted_path():
    account = Account("alison")
    account.holder = Person("Alison", "Brie")
    assert Function.get("holder.last_name").call(account) == "Brie"


def test_update_returns_copy_for_dataclass():
    lowercase_first = Function.update("first_name").call(str.lower)
    michael = Person("Michael", "Pangburn")
    updated = lowercase_first.call(michael)
    assert updated == Person("michael", "Pangburn")
    assert michael.first_name == "Michael"


def test_update_returns_copy_for_plain_object():
    upper_owner = Function.update("owner").call(str.upper)
    account = Account("miguel")
    updated = upper_owner.call(account)
    assert updated.owner == "MIGUEL"
    assert account.owner == "miguel"


def test_pipe(increment, square):
    numbers = [1, 2, 3]
    increment_and_squares = [
        Function(increment).piped(square),
        Function(increment).piped(Function(square)),
        Function.pipeline(increment, square),
        Function.pipeline(Function(increment), Function(square)),
        Function.pipeline(Function(increment), square),
    ]
    for increment_and_square in increment_and_squares:
        assert list(map(increment_and_square, numbers)) == [4, 9, 16]


def test_pipeline_with_type_changes(increment, square):
    numbers = [1, 2, 3]
    stringify = Function.pipeline(increment, square, str)
    assert list(map(stringify, numbers)) == ["4", "9", "16"]

    and_back = Function.pipeline(increment, square, str, int)
    assert list(map(and_back, numbers)) == [4, 9, 16]

    five = Function.pipeline(*[increment] * 5)
    assert list(map(five, numbers)) == [6, 7, 8]

    six = Function.pipeline(*[increment] * 6)
    assert list(map(six, numbers)) == [7, 8, 9]


def test_pipeline_stage_bounds(increment):
    with pytest.raises(ValueError):
        Function.pipeline(increment)
    with pytest.raises(ValueError):
        Function.pipeline(*[increment] * 7)


def test_pipeline_stage_bound_follows_config(increment):
    set_config(FunckitConfig(max_stages=8))
    eight = Function.pipeline(*[increment] * 8)
    assert eight.call(0) == 8


def test_identity_is_unit_for_pipe():
    f = Function(lambda x: x * 3 - 1)
    identity = Function.identity()
    for x in range(-5, 6):
        assert identity.piped(f).call(x) == f.call(x)
        assert f.piped(identity).call(x) == f.call(x)


def test_pipe_is_associative(increment, square):
    f = Function(increment)
    g = Function(square)
    h = Function(lambda x: x - 7)
    for x in range(-5, 6):
        assert f.piped(g).piped(h).call(x) == f.piped(g.piped(h)).call(x)


def test_composition_is_non_destructive(increment, square):
    f = Function(increment)
    g = f.piped(square)
    h = f.piped(str)
    assert f.call(1) == 2
    assert g.call(1) == 4
    assert h.call(1) == "2"


def test_concatenation(increment, square):
    numbers = [1, 2, 3]
    increment_and_squares = [
        Function(increment).concatenated(square),
        Function.concatenation(increment, square),
        Function.concatenation(Function(increment), Function(square)),
    ]
    for increment_and_square in increment_and_squares:
        assert list(map(increment_and_square, numbers)) == [4, 9, 16]

    to_the_eighth = [
        Function(square).concatenated(lambda x: square(square(x))),
        Function.concatenation(square, square, square),
        Function.concatenation(square, square, finally_=square),
    ]
    for eighth in to_the_eighth:
        assert list(map(eighth, numbers)) == [1, 256, 6561]


def test_concatenation_of_nothing_is_identity():
    assert Function.concatenation().call(5) == 5


def test_successful_chains():
    for n in range(2, 7):
        assert Function.chain(*[some] * n).call(5) == 5


def test_failing_chains():
    assert Function.chain(none, some).call(5) is None
    assert Function.chain(some, none).call(5) is None
    assert Function.chain(none, none).call(5) is None
    assert Function.chain(some, none, some).call(5) is None
    assert Function.chain(some, some, some, none).call(5) is None
    assert Function.chain(none, some, some, some, some).call(5) is None
    assert Function.chain(some, none, none, none, some, some).call(5) is None


def test_chain_short_circuits():
    calls = []

    def counted(x):
        calls.append(x)
        return x

    assert Function(none).chained(counted).call(1) is None
    assert calls == []

    assert Function(some).chained(counted).call(1) == 1
    assert calls == [1]


def test_chain_with_type_conversion():
    def parse_int(text):
        return int(text) if text.lstrip("-").isdigit() else None

    def index_of_zero(number):
        digits = str(number)
        return digits.index("0") if "0" in digits else None

    index = Function(parse_int).chained(index_of_zero)
    assert index.call("1203") == 2
    assert index.call("123") is None
    assert index.call("abc") is None


def test_chain_keeps_falsy_values():
    assert Function.chain(lambda x: 0, lambda x: x + 1).call("ignored") == 1


def test_compose(increment, square):
    numbers = [1, 2, 3]
    increment_and_squares = [
        Function(square).composed(increment),
        Function.composition(square, increment),
        Function.composition(Function(square), Function(increment)),
    ]
    for increment_and_square in increment_and_squares:
        assert list(map(increment_and_square, numbers)) == [4, 9, 16]

    stringify = Function.composition(str, square, increment)
    assert list(map(stringify, numbers)) == ["4", "9", "16"]

    six = Function.composition(*[increment] * 6)
    assert list(map(six, numbers)) == [7, 8, 9]


def test_composition_applies_last_function_first():
    trace = Function.composition(
        lambda s: s + "g1",
        lambda s: s + "g2",
        lambda s: s + "g3",
    )
    assert trace.call("") == "g3g2g1"


def test_exceptions_propagate_unchanged(increment):
    def explode(_):
        raise KeyError("boom")

    with pytest.raises(KeyError, match="boom"):
        Function.pipeline(increment, explode).call(1)
    with pytest.raises(KeyError, match="boom"):
        Function.chain(some, explode).call(1)
    with pytest.raises(KeyError, match="boom"):
        Function(explode).composed(increment).call(1)


def test_to_inout(increment):
    from funckit import Ref

    inout_increment = Function(increment).to_inout()
    x = Ref(0)
    inout_increment.update(x)
    assert x.value == 1
    inout_increment.update(x)
    inout_increment.update(x)
    assert x.value == 3


@pytest.mark.parametrize("build", [
    lambda f: f.piped(42),
    lambda f: f.composed(42),
    lambda f: f.chained(42),
    lambda f: f.concatenated(42),
])
def test_binary_composition_rejects_non_callable(increment, build):
    with pytest.raises(TypeError):
        build(Function(increment))


def test_pure_pipe_and_compose_reject_non_callable(increment):
    from funckit import pipe, compose

    with pytest.raises(TypeError):
        pipe(increment, "not a function")
    with pytest.raises(TypeError):
        compose(None, increment)


def test_six_stage_composition_and_chain(increment):
    labels = [lambda s, c=c: s + c for c in "abcdef"]
    assert Function.composition(*labels).call("") == "fedcba"
    assert Function.chain(*[increment] * 6).call(0) == 6
    assert Function.chain(*[increment] * 5, none).call(0) is None
