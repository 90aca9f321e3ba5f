"""Provider - 인자 없이 값을 만드는 Function"""
from typing import TypeVar, Callable

from funckit.function import Function

Out = TypeVar('Out')


class Provider(Function[None, Out]):
    """
    Function[None, Out]

    인자 없는 함수로 생성하며 make()로 호출한다.
    호출할 때마다 래핑된 함수를 실행한다 (캐싱 없음).
    """

    __slots__ = ()

    def __init__(self, make: Callable[[], Out]):
        if isinstance(make, Function):
            super().__init__(make)
            return
        if not callable(make):
            raise TypeError(f"Provider requires a callable, got {type(make).__name__}")
        super().__init__(lambda _: make())

    def make(self) -> Out:
        """새 값 생성"""
        return self._call(None)

    def __call__(self, value: None = None) -> Out:
        return self._call(value)
