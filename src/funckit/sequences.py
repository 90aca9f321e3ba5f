"""컬렉션 어댑터 - Function 계열 타입을 표준 시퀀스 연산에 연결"""
from functools import reduce
from typing import TypeVar, Callable, Iterable, MutableSequence

from funckit.comparator import Comparator, Ordering
from funckit.inout import InoutFunction, Ref

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')


def map_with(transform: Callable[[T], U], items: Iterable[T]) -> list[U]:
    return [transform(item) for item in items]


def filter_by(predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    return [item for item in items if predicate(item)]


def flat_map(transform: Callable[[T], Iterable[U]], items: Iterable[T]) -> list[U]:
    return [out for item in items for out in transform(item)]


def compact_map(transform: Callable[[T], U | None], items: Iterable[T]) -> list[U]:
    """None 결과는 제외"""
    results = (transform(item) for item in items)
    return [result for result in results if result is not None]


def reduce_with(
    initial: R,
    reducer: Callable[[tuple[R, T]], R],
    items: Iterable[T],
) -> R:
    """reducer는 (누적값, 원소) 튜플 하나를 입력으로 받음"""
    return reduce(lambda acc, item: reducer((acc, item)), items, initial)


def _as_comparator(comparator: Callable[[T, T], Ordering]) -> Comparator[T]:
    return comparator if isinstance(comparator, Comparator) else Comparator(comparator)


def sorted_by(items: Iterable[T], comparator: Callable[[T, T], Ordering]) -> list[T]:
    """Comparator 순서로 정렬한 새 리스트 (안정 정렬)"""
    return sorted(items, key=_as_comparator(comparator).to_key())


def sort_by(items: list[T], comparator: Callable[[T, T], Ordering]) -> None:
    """제자리 정렬 (안정 정렬)"""
    items.sort(key=_as_comparator(comparator).to_key())


def map_optional(value: T | None, transform: Callable[[T], U | None]) -> U | None:
    """value가 None이면 None, 아니면 transform(value)"""
    if value is None:
        return None
    return transform(value)


def update_each(items: MutableSequence[T], mutation: Callable[[Ref[T]], None]) -> None:
    """각 원소를 인덱스로 꺼내 변경한 뒤 다시 저장"""
    update = InoutFunction(mutation)
    for index, item in enumerate(items):
        ref = Ref(item)
        update.update(ref)
        items[index] = ref.value
