"""Consumer - 결과 없이 입력을 소비하는 Function"""
from typing import TypeVar, Callable

from funckit.combinators import check_callables
from funckit.function import Function

In = TypeVar('In')


class Consumer(Function[In, None]):
    """Function[In, None] (부수효과 전용)"""

    __slots__ = ()

    def accept(self, value: In) -> None:
        """입력 소비"""
        self._call(value)

    def then(self, next_: Callable[[In], None]) -> 'Consumer[In]':
        """self 다음 next_를 같은 입력으로 호출"""
        check_callables((next_,))

        def consume_both(value: In) -> None:
            self._call(value)
            next_(value)
        return Consumer(consume_both)
