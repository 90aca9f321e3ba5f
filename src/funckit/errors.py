"""에러 타입 정의"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigError:
    """설정 로딩/검증 에러"""
    field: str
    message: str
    code: str = "CONFIG_ERROR"

    def __str__(self) -> str:
        return f"{self.code} [{self.field}]: {self.message}"
