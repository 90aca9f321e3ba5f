"""Comparator - 두 값의 3-way 비교 Function"""
import inspect
from enum import IntEnum
from functools import cmp_to_key
from typing import TypeVar, Callable, Any

from funckit.function import Function

T = TypeVar('T')


class Ordering(IntEnum):
    """3-way 비교 결과"""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reversed(self) -> 'Ordering':
        """LESS <-> GREATER, EQUAL 유지"""
        return Ordering(-self.value)

    @classmethod
    def of(cls, value: int) -> 'Ordering':
        """정수 부호로 Ordering 생성 (cmp 스타일 호환)"""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


def _natural(lhs: Any, rhs: Any) -> Ordering:
    if lhs < rhs:
        return Ordering.LESS
    if lhs > rhs:
        return Ordering.GREATER
    return Ordering.EQUAL


def _always_equal(lhs: Any, rhs: Any) -> Ordering:
    return Ordering.EQUAL


def _takes_two_arguments(f: Callable[..., Any]) -> bool:
    """f(lhs, rhs) 형태로 호출 가능한지 (시그니처를 알 수 없으면 False)"""
    try:
        inspect.signature(f).bind(None, None)
    except (TypeError, ValueError):
        return False
    return True


class Comparator(Function[tuple[T, T], Ordering]):
    """
    Function[(T, T), Ordering]

    Comparator(lambda lhs, rhs: ...) 처럼 두 인자 함수로 생성하며,
    call((lhs, rhs)) 또는 compare(lhs, rhs)로 호출한다.
    strict weak ordering 여부는 검증하지 않는다 (호출자 책임).
    """

    __slots__ = ()

    def __init__(self, compare: Callable[[T, T], Ordering]):
        if isinstance(compare, Function):
            super().__init__(compare)
            return
        if not callable(compare):
            raise TypeError(f"Comparator requires a callable, got {type(compare).__name__}")
        super().__init__(lambda pair: compare(*pair))

    def compare(self, lhs: T, rhs: T) -> Ordering:
        """lhs와 rhs 비교"""
        return self._call((lhs, rhs))

    def to_key(self) -> Callable[[T], Any]:
        """sorted(key=...)용 키 함수"""
        return cmp_to_key(self.compare)

    # ============================================================
    # 생성
    # ============================================================

    @staticmethod
    def natural_order() -> 'Comparator[Any]':
        """원소의 자연 순서"""
        return Comparator(_natural)

    @staticmethod
    def reverse_order() -> 'Comparator[Any]':
        """자연 순서의 역순"""
        return Comparator(lambda lhs, rhs: _natural(rhs, lhs))

    @staticmethod
    def comparing(key: Callable[[T], Any]) -> 'Comparator[T]':
        """추출한 키의 자연 순서로 비교"""
        return Comparator(lambda lhs, rhs: _natural(key(lhs), key(rhs)))

    @staticmethod
    def from_cmp(cmp: Callable[[T, T], int]) -> 'Comparator[T]':
        """음수/0/양수를 반환하는 cmp 함수를 Comparator로"""
        return Comparator(lambda lhs, rhs: Ordering.of(cmp(lhs, rhs)))

    # ============================================================
    # 순차 비교
    # ============================================================

    @staticmethod
    def sequence(
        *comparators: Callable[[T, T], Ordering],
        finally_: Callable[[T, T], Ordering] = _always_equal,
    ) -> 'Comparator[T]':
        """
        사전식 비교

        왼쪽부터 평가해 처음으로 EQUAL이 아닌 결과를 반환하고,
        모두 EQUAL이면 finally_의 결과를 반환한다.
        """
        stages = [Comparator(c) for c in comparators]
        final = Comparator(finally_)

        def compare_in_sequence(lhs: T, rhs: T) -> Ordering:
            for comparator in stages:
                result = comparator.compare(lhs, rhs)
                if result != Ordering.EQUAL:
                    return result
            return final.compare(lhs, rhs)
        return Comparator(compare_in_sequence)

    def then_comparing(self, by: 'Comparator[T] | Callable[[T], Any]') -> 'Comparator[T]':
        """
        동률일 때 다음 기준으로 비교

        by가 Comparator이거나 두 인자 함수면 비교 함수로,
        한 인자 callable이면 키 추출 함수로 취급한다.
        """
        return Comparator.sequence(self, _comparator_or_key(by))

    def reversed(self) -> 'Comparator[T]':
        """순서 반전 (EQUAL 유지)"""
        return Comparator(lambda lhs, rhs: self.compare(lhs, rhs).reversed())

    # ============================================================
    # None 처리
    # ============================================================

    @staticmethod
    def nil_values_first(
        by: 'Comparator[Any] | Callable[[T], Any] | None' = None,
    ) -> 'Comparator[Any]':
        """
        None을 앞에 두는 비교

        by 없음: Optional 값의 자연 순서
        by가 Comparator 또는 두 인자 함수: 둘 다 값이 있으면 by에 위임
        by가 한 인자 callable: 추출한 Optional 키로 비교
        """
        return _nil_ordering(by, nil_first=True)

    @staticmethod
    def nil_values_last(
        by: 'Comparator[Any] | Callable[[T], Any] | None' = None,
    ) -> 'Comparator[Any]':
        """None을 뒤에 두는 비교 (by 해석은 nil_values_first와 동일)"""
        return _nil_ordering(by, nil_first=False)


def _is_comparator(by: Any) -> bool:
    return isinstance(by, Comparator) or (
        not isinstance(by, Function) and _takes_two_arguments(by)
    )


def _comparator_or_key(by: Any) -> Comparator[Any]:
    if _is_comparator(by):
        return Comparator(by)
    return Comparator.comparing(by)


def _nil_ordering(by: Any, nil_first: bool) -> Comparator[Any]:
    if by is None or _is_comparator(by):
        present = Comparator.natural_order() if by is None else Comparator(by)
        nil_side = Ordering.LESS if nil_first else Ordering.GREATER

        def compare_optional(lhs: Any, rhs: Any) -> Ordering:
            match (lhs is None, rhs is None):
                case (True, True):
                    return Ordering.EQUAL
                case (True, False):
                    return nil_side
                case (False, True):
                    return nil_side.reversed()
                case _:
                    return present.compare(lhs, rhs)
        return Comparator(compare_optional)

    optional_order = _nil_ordering(None, nil_first)
    return Comparator(lambda lhs, rhs: optional_order.compare(by(lhs), by(rhs)))
