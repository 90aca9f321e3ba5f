"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, ValidationError
import yaml

from funckit.result import Result, Success, Failure, bind, unwrap_or_raise
from funckit.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ============================================================
# 로깅 설정
# ============================================================

class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: LogLevel = "WARNING"
    rich: bool = True
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = {"frozen": True}


# ============================================================
# 전체 설정
# ============================================================

class FunckitConfig(BaseModel):
    """라이브러리 설정"""
    # pipeline / composition / chain 단계 수 상한
    max_stages: int = Field(default=6, ge=2, le=32)
    # curried / uncurried 인자 수 상한
    max_curry_arity: int = Field(default=8, ge=2, le=32)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


_current = FunckitConfig()


def get_config() -> FunckitConfig:
    """현재 설정 반환"""
    return _current


def set_config(config: FunckitConfig) -> FunckitConfig:
    """설정 교체, 이전 설정 반환"""
    global _current
    previous, _current = _current, config
    return previous


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict, ConfigError]:
    """YAML 파일 로드 (예외 대신 Failure 반환)"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(ConfigError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except OSError as e:
        return Failure(ConfigError(
            field="config_path",
            message=f"Cannot read config file {path}: {e.strerror or e}",
        ))
    except UnicodeDecodeError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Config file is not valid UTF-8: {e.reason}",
        ))
    except yaml.YAMLError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))

    if data is None:
        return Success({})
    if not isinstance(data, dict):
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Top-level YAML must be a mapping, got {type(data).__name__}",
        ))
    return Success(data)


def parse_config(data: dict) -> Result[FunckitConfig, ConfigError]:
    """딕셔너리를 FunckitConfig로 파싱"""
    try:
        return Success(FunckitConfig.model_validate(data))
    except ValidationError as e:
        return Failure(ConfigError(
            field="config",
            message=str(e),
        ))


def load_config(path: Path | str | None = None) -> Result[FunckitConfig, ConfigError]:
    """
    설정 로드 (YAML + 기본값)

    path가 없으면 기본 경로 탐색, 파일이 없으면 기본값
    """
    if path is None:
        default_paths = [
            Path("funckit.yaml"),
            Path("funckit.yml"),
            Path.home() / ".config" / "funckit" / "config.yaml",
        ]
        path = next((p for p in default_paths if p.exists()), None)

    if path is None:
        return Success(FunckitConfig())

    return bind(load_yaml(Path(path)), parse_config)


def _overlay(base: dict, overrides: dict) -> dict:
    """중첩 dict 위에 overrides를 덮어씀 (양쪽이 dict인 키는 재귀)"""
    return {
        **base,
        **{
            key: _overlay(base[key], value)
            if isinstance(base.get(key), dict) and isinstance(value, dict)
            else value
            for key, value in overrides.items()
        },
    }


def merge_config(base: FunckitConfig, overrides: dict) -> Result[FunckitConfig, ConfigError]:
    """
    base에 부분 설정을 덮어쓴 새 설정

    {"logging": {"level": "DEBUG"}} 처럼 일부 키만 지정하면 나머지는 base 값을 유지한다.
    """
    return parse_config(_overlay(base.model_dump(), overrides))


def configure(
    path: Path | str | None = None,
    overrides: dict | None = None,
) -> FunckitConfig:
    """
    설정 파일을 로드하고 overrides를 덮어써 적용

    로드나 검증에 실패하면 ValueError
    """
    result = bind(load_config(path), lambda config: merge_config(config, overrides or {}))
    config = unwrap_or_raise(result)
    set_config(config)
    return config
