"""Predicate - bool을 반환하는 Function"""
from typing import TypeVar, Callable, Any

from funckit.combinators import check_callables
from funckit.function import Function

In = TypeVar('In')

PredicateLike = Callable[[In], bool]


class Predicate(Function[In, bool]):
    """
    Function[In, bool]

    and_ / or_ 는 표준 단락 평가를 따른다: 왼쪽이 결과를 결정하면
    오른쪽 predicate는 호출되지 않는다. 연산자 ~, &, | 도 지원.
    """

    __slots__ = ()

    def test(self, value: In) -> bool:
        """입력 검사"""
        return bool(self._call(value))

    # ============================================================
    # 논리 연산
    # ============================================================

    def negated(self) -> 'Predicate[In]':
        """논리 NOT"""
        return Predicate(lambda value: not self.test(value))

    def and_(self, other: PredicateLike) -> 'Predicate[In]':
        """논리 AND (self가 False면 other 미호출)"""
        check_callables((other,))
        return Predicate(lambda value: self.test(value) and bool(other(value)))

    def or_(self, other: PredicateLike) -> 'Predicate[In]':
        """논리 OR (self가 True면 other 미호출)"""
        check_callables((other,))
        return Predicate(lambda value: self.test(value) or bool(other(value)))

    def __invert__(self) -> 'Predicate[In]':
        return self.negated()

    def __and__(self, other: PredicateLike) -> 'Predicate[In]':
        return self.and_(other)

    def __rand__(self, other: PredicateLike) -> 'Predicate[In]':
        return Predicate(other).and_(self)

    def __or__(self, other: PredicateLike) -> 'Predicate[In]':
        return self.or_(other)

    def __ror__(self, other: PredicateLike) -> 'Predicate[In]':
        return Predicate(other).or_(self)

    @staticmethod
    def all_of(
        *predicates: PredicateLike,
        finally_: PredicateLike | None = None,
    ) -> 'Predicate[Any]':
        """모두 참인지 (왼쪽부터, 첫 False에서 단락, finally_는 마지막)"""
        tests = list(predicates) + ([finally_] if finally_ is not None else [])
        check_callables(tuple(tests))

        def test_all(value: Any) -> bool:
            for predicate in tests:
                if not predicate(value):
                    return False
            return True
        return Predicate(test_all)

    @staticmethod
    def any_of(
        *predicates: PredicateLike,
        finally_: PredicateLike | None = None,
    ) -> 'Predicate[Any]':
        """하나라도 참인지 (왼쪽부터, 첫 True에서 단락, finally_는 마지막)"""
        tests = list(predicates) + ([finally_] if finally_ is not None else [])
        check_callables(tuple(tests))

        def test_any(value: Any) -> bool:
            for predicate in tests:
                if predicate(value):
                    return True
            return False
        return Predicate(test_any)

    # ============================================================
    # 비교 유틸리티
    # ============================================================

    @staticmethod
    def always_true() -> 'Predicate[Any]':
        return Predicate(lambda _: True)

    @staticmethod
    def always_false() -> 'Predicate[Any]':
        return Predicate(lambda _: False)

    @staticmethod
    def is_equal_to(other: Any) -> 'Predicate[Any]':
        return Predicate(lambda value: value == other)

    @staticmethod
    def is_not_equal_to(other: Any) -> 'Predicate[Any]':
        return Predicate(lambda value: value != other)

    @staticmethod
    def is_less_than(bound: Any) -> 'Predicate[Any]':
        return Predicate(lambda value: value < bound)

    @staticmethod
    def is_less_than_or_equal_to(bound: Any) -> 'Predicate[Any]':
        return Predicate(lambda value: value <= bound)

    @staticmethod
    def is_greater_than(bound: Any) -> 'Predicate[Any]':
        return Predicate(lambda value: value > bound)

    @staticmethod
    def is_greater_than_or_equal_to(bound: Any) -> 'Predicate[Any]':
        return Predicate(lambda value: value >= bound)

    @staticmethod
    def is_in_range(lower: Any, upper: Any) -> 'Predicate[Any]':
        """반열린 구간 [lower, upper)"""
        return Predicate(lambda value: lower <= value < upper)

    @staticmethod
    def is_in_closed_range(lower: Any, upper: Any) -> 'Predicate[Any]':
        """닫힌 구간 [lower, upper]"""
        return Predicate(lambda value: lower <= value <= upper)
