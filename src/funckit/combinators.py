"""함수 합성 유틸리티 (순수 함수)"""
import inspect
import logging
from functools import reduce
from typing import TypeVar, Callable, Any, overload

from funckit.config import get_config

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
E = TypeVar('E')
F = TypeVar('F')
G = TypeVar('G')
T = TypeVar('T')


# ============================================================
# 기본 함수
# ============================================================

def identity(x: A) -> A:
    """항등 함수"""
    return x


def const(value: A) -> Callable[[Any], A]:
    """상수 함수"""
    return lambda _: value


def check_callables(funcs: tuple) -> None:
    """모든 단계가 callable인지 검증 (생성 시점 TypeError)"""
    for i, f in enumerate(funcs):
        if not callable(f):
            raise TypeError(f"Stage {i} is not callable: {f!r}")


def _check_stages(funcs: tuple, name: str) -> None:
    """단계 수 검증 (2 ~ max_stages)"""
    limit = get_config().max_stages
    if not 2 <= len(funcs) <= limit:
        raise ValueError(f"{name} takes 2-{limit} functions, got {len(funcs)}")
    check_callables(funcs)


# ============================================================
# 정방향 합성 (pipe)
# ============================================================

def pipe(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """f 다음 g 적용"""
    check_callables((f, g))

    def piped(x: A) -> C:
        return g(f(x))
    return piped


@overload
def pipeline(f1: Callable[[A], B], f2: Callable[[B], C], /) -> Callable[[A], C]: ...
@overload
def pipeline(
    f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], /
) -> Callable[[A], D]: ...
@overload
def pipeline(
    f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D],
    f4: Callable[[D], E], /
) -> Callable[[A], E]: ...
@overload
def pipeline(
    f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D],
    f4: Callable[[D], E], f5: Callable[[E], F], /
) -> Callable[[A], F]: ...
@overload
def pipeline(
    f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D],
    f4: Callable[[D], E], f5: Callable[[E], F], f6: Callable[[F], G], /
) -> Callable[[A], G]: ...
@overload
def pipeline(*funcs: Callable[..., Any]) -> Callable[..., Any]: ...


def pipeline(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """왼쪽에서 오른쪽으로 함수 합성"""
    _check_stages(funcs, "pipeline")
    logger.debug("pipeline built with %d stages", len(funcs))

    def apply(x: Any) -> Any:
        return reduce(lambda acc, f: f(acc), funcs, x)
    return apply


# ============================================================
# 역방향 합성 (compose)
# ============================================================

def compose(g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """g(f(x)) - 바깥 함수를 먼저 표기"""
    return pipe(f, g)


@overload
def composition(g1: Callable[[B], C], g2: Callable[[A], B], /) -> Callable[[A], C]: ...
@overload
def composition(
    g1: Callable[[C], D], g2: Callable[[B], C], g3: Callable[[A], B], /
) -> Callable[[A], D]: ...
@overload
def composition(
    g1: Callable[[D], E], g2: Callable[[C], D], g3: Callable[[B], C],
    g4: Callable[[A], B], /
) -> Callable[[A], E]: ...
@overload
def composition(
    g1: Callable[[E], F], g2: Callable[[D], E], g3: Callable[[C], D],
    g4: Callable[[B], C], g5: Callable[[A], B], /
) -> Callable[[A], F]: ...
@overload
def composition(
    g1: Callable[[F], G], g2: Callable[[E], F], g3: Callable[[D], E],
    g4: Callable[[C], D], g5: Callable[[B], C], g6: Callable[[A], B], /
) -> Callable[[A], G]: ...
@overload
def composition(*funcs: Callable[..., Any]) -> Callable[..., Any]: ...


def composition(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """오른쪽에서 왼쪽으로 함수 합성"""
    _check_stages(funcs, "composition")
    return pipeline(*reversed(funcs))


# ============================================================
# 동일 타입 연결 (concatenation)
# ============================================================

def concatenate(
    *funcs: Callable[[T], T],
    finally_: Callable[[T], T] = identity,
) -> Callable[[T], T]:
    """T -> T 함수들을 순서대로 연결 (가변 길이)"""
    check_callables(funcs + (finally_,))

    def apply(x: T) -> T:
        return finally_(reduce(lambda acc, f: f(acc), funcs, x))
    return apply


# ============================================================
# Optional 체이닝 (None 단락)
# ============================================================

@overload
def chain(
    f1: Callable[[A], B | None], f2: Callable[[B], C | None], /
) -> Callable[[A], C | None]: ...
@overload
def chain(
    f1: Callable[[A], B | None], f2: Callable[[B], C | None],
    f3: Callable[[C], D | None], /
) -> Callable[[A], D | None]: ...
@overload
def chain(
    f1: Callable[[A], B | None], f2: Callable[[B], C | None],
    f3: Callable[[C], D | None], f4: Callable[[D], E | None], /
) -> Callable[[A], E | None]: ...
@overload
def chain(
    f1: Callable[[A], B | None], f2: Callable[[B], C | None],
    f3: Callable[[C], D | None], f4: Callable[[D], E | None],
    f5: Callable[[E], F | None], /
) -> Callable[[A], F | None]: ...
@overload
def chain(
    f1: Callable[[A], B | None], f2: Callable[[B], C | None],
    f3: Callable[[C], D | None], f4: Callable[[D], E | None],
    f5: Callable[[E], F | None], f6: Callable[[F], G | None], /
) -> Callable[[A], G | None]: ...
@overload
def chain(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]: ...


def chain(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """None이 나오면 이후 단계를 호출하지 않고 None 반환"""
    _check_stages(funcs, "chain")
    logger.debug("chain built with %d stages", len(funcs))

    def apply(x: Any) -> Any:
        value = x
        for f in funcs:
            value = f(value)
            if value is None:
                return None
        return value
    return apply


# ============================================================
# 커링
# ============================================================

def check_arity(arity: int) -> None:
    """커링 인자 수 검증 (2 ~ max_curry_arity)"""
    limit = get_config().max_curry_arity
    if not 2 <= arity <= limit:
        raise ValueError(f"arity must be 2-{limit}, got {arity}")


def _positional_arity(f: Callable[..., Any]) -> int:
    """위치 인자 개수 추론"""
    params = inspect.signature(f).parameters.values()
    kinds = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        raise ValueError("arity cannot be inferred for *args functions")
    return sum(1 for p in params if p.kind in kinds and p.default is p.empty)


def curried_chain(
    saturate: Callable[[tuple], Any],
    arity: int,
    wrap: Callable[[Callable[[Any], Any]], Any] = identity,
    collected: tuple = (),
) -> Any:
    """인자를 하나씩 모아 arity개가 되면 saturate(tuple) 호출"""
    def take(arg: Any) -> Any:
        args = collected + (arg,)
        if len(args) == arity:
            return saturate(args)
        return curried_chain(saturate, arity, wrap, args)
    return wrap(take)


def curry(f: Callable[..., C], arity: int | None = None) -> Callable[[Any], Any]:
    """n인자 함수 커링: f(a, b, c) -> f(a)(b)(c)"""
    if arity is None:
        arity = _positional_arity(f)
    check_arity(arity)
    return curried_chain(lambda args: f(*args), arity)


def uncurry(f: Callable[[Any], Any], arity: int = 2) -> Callable[..., Any]:
    """커링 해제: f(a)(b)(c) -> f(a, b, c)"""
    check_arity(arity)

    def uncurried(*args: Any) -> Any:
        if len(args) != arity:
            raise TypeError(f"expected {arity} arguments, got {len(args)}")
        return reduce(lambda stage, arg: stage(arg), args, f)
    return uncurried


def curry2(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """2인자 함수 커링"""
    return lambda a: lambda b: f(a, b)


def flip(f: Callable[[A], Callable[[B], C]]) -> Callable[[B], Callable[[A], C]]:
    """커링된 함수의 첫 두 인자 순서 뒤집기"""
    return lambda b: lambda a: f(a)(b)
