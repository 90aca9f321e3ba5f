"""Function 래퍼 - 단일 인자 함수와 합성 연산"""
import copy
import dataclasses
import logging
from operator import attrgetter
from typing import TypeVar, Generic, Callable, Any, Literal, TYPE_CHECKING, overload

from funckit.combinators import (
    identity, const, pipe, pipeline, compose, composition,
    concatenate, chain, check_arity, curried_chain, uncurry,
)

if TYPE_CHECKING:
    from funckit.inout import InoutFunction

logger = logging.getLogger(__name__)

In = TypeVar('In')
Out = TypeVar('Out')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
E = TypeVar('E')
F = TypeVar('F')
G = TypeVar('G')
T = TypeVar('T')


def replace_attribute(obj: T, name: str, value: Any) -> T:
    """속성 하나를 바꾼 사본 반환 (원본은 변경하지 않음)"""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.replace(obj, **{name: value})
    updated = copy.copy(obj)
    setattr(updated, name, value)
    return updated


class Function(Generic[In, Out]):
    """
    단일 인자 함수 래퍼

    생성 후 불변. 모든 합성 연산은 피연산자를 캡처한 새 Function을 반환한다.
    Function 자체가 callable이므로 일반 함수 자리에 그대로 전달할 수 있다.
    """

    __slots__ = ("_call",)

    def __init__(self, f: Callable[[In], Out]):
        if isinstance(f, Function):
            f = f._call
        if not callable(f):
            raise TypeError(f"Function requires a callable, got {type(f).__name__}")
        self._call = f

    def call(self, value: In) -> Out:
        """래핑된 함수 호출"""
        return self._call(value)

    def __call__(self, value: In) -> Out:
        return self._call(value)

    def __repr__(self) -> str:
        name = getattr(self._call, "__qualname__", repr(self._call))
        return f"{type(self).__name__}({name})"

    # ============================================================
    # 기본 함수
    # ============================================================

    @staticmethod
    def identity() -> 'Function[A, A]':
        """입력을 그대로 반환하는 함수"""
        return Function(identity)

    @staticmethod
    def constant(value: A) -> 'Function[Any, A]':
        """입력과 무관하게 value를 반환하는 함수"""
        return Function(const(value))

    @staticmethod
    def get(name: str) -> 'Function[Any, Any]':
        """속성 getter (점 경로 지원: "address.city")"""
        return Function(attrgetter(name))

    @staticmethod
    def update(name: str) -> 'Function[Callable[[Any], Any], Function[T, T]]':
        """필드 변환 함수를 받아, 그 필드만 바꾼 사본을 반환하는 함수 생성"""
        def with_transform(transform: Callable[[Any], Any]) -> Function[T, T]:
            def updated(obj: T) -> T:
                return replace_attribute(obj, name, transform(getattr(obj, name)))
            return Function(updated)
        return Function(with_transform)

    # ============================================================
    # 정방향 합성
    # ============================================================

    def piped(self, into: Callable[[Out], C]) -> 'Function[In, C]':
        """이 함수의 출력을 into에 전달"""
        return Function(pipe(self._call, into))

    @overload
    @staticmethod
    def pipeline(f1: Callable[[A], B], f2: Callable[[B], C], /) -> 'Function[A, C]': ...
    @overload
    @staticmethod
    def pipeline(
        f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], /
    ) -> 'Function[A, D]': ...
    @overload
    @staticmethod
    def pipeline(
        f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D],
        f4: Callable[[D], E], /
    ) -> 'Function[A, E]': ...
    @overload
    @staticmethod
    def pipeline(
        f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D],
        f4: Callable[[D], E], f5: Callable[[E], F], /
    ) -> 'Function[A, F]': ...
    @overload
    @staticmethod
    def pipeline(
        f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D],
        f4: Callable[[D], E], f5: Callable[[E], F], f6: Callable[[F], G], /
    ) -> 'Function[A, G]': ...
    @overload
    @staticmethod
    def pipeline(*funcs: Callable[[Any], Any]) -> 'Function[Any, Any]': ...

    @staticmethod
    def pipeline(*funcs: Callable[[Any], Any]) -> 'Function[Any, Any]':
        """각 함수의 출력을 다음 함수의 입력으로 (2 ~ max_stages 단계)"""
        return Function(pipeline(*funcs))

    # ============================================================
    # 역방향 합성
    # ============================================================

    def composed(self, with_: Callable[[A], In]) -> 'Function[A, Out]':
        """with_를 먼저 적용한 뒤 이 함수 적용"""
        return Function(compose(self._call, with_))

    @overload
    @staticmethod
    def composition(g1: Callable[[B], C], g2: Callable[[A], B], /) -> 'Function[A, C]': ...
    @overload
    @staticmethod
    def composition(
        g1: Callable[[C], D], g2: Callable[[B], C], g3: Callable[[A], B], /
    ) -> 'Function[A, D]': ...
    @overload
    @staticmethod
    def composition(
        g1: Callable[[D], E], g2: Callable[[C], D], g3: Callable[[B], C],
        g4: Callable[[A], B], /
    ) -> 'Function[A, E]': ...
    @overload
    @staticmethod
    def composition(
        g1: Callable[[E], F], g2: Callable[[D], E], g3: Callable[[C], D],
        g4: Callable[[B], C], g5: Callable[[A], B], /
    ) -> 'Function[A, F]': ...
    @overload
    @staticmethod
    def composition(
        g1: Callable[[F], G], g2: Callable[[E], F], g3: Callable[[D], E],
        g4: Callable[[C], D], g5: Callable[[B], C], g6: Callable[[A], B], /
    ) -> 'Function[A, G]': ...
    @overload
    @staticmethod
    def composition(*funcs: Callable[[Any], Any]) -> 'Function[Any, Any]': ...

    @staticmethod
    def composition(*funcs: Callable[[Any], Any]) -> 'Function[Any, Any]':
        """composition(g1, ..., gn)(x) == g1(...gn(x))"""
        return Function(composition(*funcs))

    # ============================================================
    # 동일 타입 연결
    # ============================================================

    def concatenated(self, with_: Callable[[Out], Out]) -> 'Function[In, Out]':
        """입출력 타입이 같은 함수끼리 정방향 연결"""
        return Function.concatenation(self, with_)

    @staticmethod
    def concatenation(
        *funcs: Callable[[T], T],
        finally_: Callable[[T], T] | None = None,
    ) -> 'Function[T, T]':
        """T -> T 함수들의 가변 길이 연결, 마지막에 finally_ 적용"""
        return Function(concatenate(*funcs, finally_=finally_ or identity))

    # ============================================================
    # Optional 체이닝
    # ============================================================

    def chained(self, with_: Callable[[Any], C | None]) -> 'Function[In, C | None]':
        """출력이 None이 아닐 때만 with_ 호출"""
        return Function(chain(self._call, with_))

    @overload
    @staticmethod
    def chain(
        f1: Callable[[A], B | None], f2: Callable[[B], C | None], /
    ) -> 'Function[A, C | None]': ...
    @overload
    @staticmethod
    def chain(
        f1: Callable[[A], B | None], f2: Callable[[B], C | None],
        f3: Callable[[C], D | None], /
    ) -> 'Function[A, D | None]': ...
    @overload
    @staticmethod
    def chain(
        f1: Callable[[A], B | None], f2: Callable[[B], C | None],
        f3: Callable[[C], D | None], f4: Callable[[D], E | None], /
    ) -> 'Function[A, E | None]': ...
    @overload
    @staticmethod
    def chain(
        f1: Callable[[A], B | None], f2: Callable[[B], C | None],
        f3: Callable[[C], D | None], f4: Callable[[D], E | None],
        f5: Callable[[E], F | None], /
    ) -> 'Function[A, F | None]': ...
    @overload
    @staticmethod
    def chain(
        f1: Callable[[A], B | None], f2: Callable[[B], C | None],
        f3: Callable[[C], D | None], f4: Callable[[D], E | None],
        f5: Callable[[E], F | None], f6: Callable[[F], G | None], /
    ) -> 'Function[A, G | None]': ...
    @overload
    @staticmethod
    def chain(*funcs: Callable[[Any], Any]) -> 'Function[Any, Any]': ...

    @staticmethod
    def chain(*funcs: Callable[[Any], Any]) -> 'Function[Any, Any]':
        """None이 나오는 즉시 단락되는 파이프라인"""
        return Function(chain(*funcs))

    # ============================================================
    # 커링
    # ============================================================

    @overload
    def curried(
        self: 'Function[tuple[A, B], C]', arity: Literal[2] = 2,
    ) -> 'Function[A, Function[B, C]]': ...
    @overload
    def curried(
        self: 'Function[tuple[A, B, C], D]', arity: Literal[3],
    ) -> 'Function[A, Function[B, Function[C, D]]]': ...
    @overload
    def curried(
        self: 'Function[tuple[A, B, C, D], E]', arity: Literal[4],
    ) -> 'Function[A, Function[B, Function[C, Function[D, E]]]]': ...
    @overload
    def curried(self, arity: int) -> 'Function[Any, Any]': ...

    def curried(self, arity: int = 2) -> 'Function[Any, Any]':
        """
        튜플 입력 함수를 우측 중첩 체인으로 변환

        Function(lambda t: t[0] + t[1]).curried().call(1).call(2) == 3
        체인이 포화될 때까지 래핑된 함수는 호출되지 않는다.
        """
        check_arity(arity)
        logger.debug("currying %r with arity %d", self, arity)
        return curried_chain(self._call, arity, wrap=Function)

    def uncurried(self, arity: int = 2) -> 'Function[tuple, Any]':
        """curried()의 역연산: 체인을 튜플 입력 함수로"""
        applied = uncurry(self._call, arity)

        def call_with_tuple(args: tuple) -> Any:
            return applied(*args)
        return Function(call_with_tuple)

    def flipped(self) -> 'Function[Any, Function[In, Any]]':
        """A -> (B -> C) 를 B -> (A -> C) 로 (B는 튜플일 수 있음)"""
        def take_second(b: Any) -> Function[In, Any]:
            return Function(lambda a: self._call(a)(b))
        return Function(take_second)

    def promoting_output(self) -> 'Function[In, Function[Any, Any]]':
        """callable 출력을 Function으로 승격"""
        return Function(lambda value: Function(self._call(value)))

    # ============================================================
    # 변환
    # ============================================================

    def to_inout(self) -> 'InoutFunction[In]':
        """T -> T 함수를 Ref 값을 갱신하는 InoutFunction으로"""
        from funckit.inout import InoutFunction, Ref

        def update(ref: Ref[In]) -> None:
            ref.value = self._call(ref.value)
        return InoutFunction(update)
