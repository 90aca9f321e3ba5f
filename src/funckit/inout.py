"""InoutFunction - 값을 제자리에서 변경하는 함수 래퍼"""
import copy
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Any

from funckit.function import Function, replace_attribute

T = TypeVar('T')

Mutation = Callable[['Ref[T]'], None]


@dataclass
class Ref(Generic[T]):
    """
    가변 참조 셀

    InoutFunction 호출 동안 value에 대한 배타적 쓰기 권한을 나타낸다.
    """
    value: T


def _no_op(ref: Ref[Any]) -> None:
    return None


class InoutFunction(Generic[T]):
    """
    Ref[T]를 제자리에서 변경하고 아무것도 반환하지 않는 함수 래퍼

    생성 후 불변. 연결 연산은 새 InoutFunction을 반환한다.
    """

    __slots__ = ("_update",)

    def __init__(self, update: Mutation):
        if isinstance(update, InoutFunction):
            update = update._update
        if not callable(update):
            raise TypeError(f"InoutFunction requires a callable, got {type(update).__name__}")
        self._update = update

    def update(self, ref: Ref[T]) -> None:
        """ref.value 변경"""
        self._update(ref)

    def __call__(self, ref: Ref[T]) -> None:
        self._update(ref)

    def __repr__(self) -> str:
        name = getattr(self._update, "__qualname__", repr(self._update))
        return f"InoutFunction({name})"

    # ============================================================
    # 연결
    # ============================================================

    def concatenated(self, with_: Mutation) -> 'InoutFunction[T]':
        """self 다음 with_ 를 같은 Ref에 적용"""
        return InoutFunction.concatenation(self, with_)

    @staticmethod
    def concatenation(
        *funcs: Mutation,
        finally_: Mutation = _no_op,
    ) -> 'InoutFunction[T]':
        """가변 길이 연결, 마지막에 finally_ 적용"""
        stages = list(funcs) + [finally_]
        for i, f in enumerate(stages):
            if not callable(f):
                raise TypeError(f"Stage {i} is not callable: {f!r}")

        def update_all(ref: Ref[T]) -> None:
            for f in stages:
                f(ref)
        return InoutFunction(update_all)

    # ============================================================
    # 변환
    # ============================================================

    def to_pure(self) -> Function[T, T]:
        """입력을 복사해 변경한 뒤 반환하는 순수 함수로 (원본 불변)"""
        def apply_to_copy(value: T) -> T:
            ref = Ref(copy.deepcopy(value))
            self._update(ref)
            return ref.value
        return Function(apply_to_copy)

    @staticmethod
    def update_attribute(name: str) -> Function[Mutation, 'InoutFunction[Any]']:
        """필드에 대한 변경을 그 필드를 가진 객체에 대한 변경으로 승격"""
        def with_mutation(mutation: Mutation) -> InoutFunction[Any]:
            def update_field(ref: Ref[Any]) -> None:
                field = Ref(getattr(ref.value, name))
                mutation(field)
                ref.value = replace_attribute(ref.value, name, field.value)
            return InoutFunction(update_field)
        return Function(with_mutation)
