"""설정 로딩 결과 타입 (Success / Failure)"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union, Any

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """로드 또는 검증 성공"""
    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """로드 또는 검증 실패 (보통 ConfigError 보관)"""
    error: E


Result = Union[Success[T], Failure[E]]

Step = Callable[[Any], Result[Any, E]]


def bind(result: Result[Any, E], *steps: Step) -> Result[Any, E]:
    """
    Success인 동안 steps를 차례로 적용

    첫 Failure가 나오면 이후 단계는 호출하지 않고 그 Failure를 반환한다.
    bind(load_yaml(path), parse_config, validate) 처럼 여러 단계를 한 번에 잇는다.
    """
    for step in steps:
        match result:
            case Failure():
                return result
            case Success(value):
                result = step(value)
    return result


def unwrap_or_raise(
    result: Result[T, E],
    exception_fn: Callable[[E], Exception] = lambda error: ValueError(str(error)),
) -> T:
    """Success 값 반환, Failure면 exception_fn(error)를 raise"""
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise exception_fn(error)
