"""funckit - 합성 가능한 함수 래퍼"""
from funckit.function import Function
from funckit.predicate import Predicate
from funckit.comparator import Comparator, Ordering
from funckit.consumer import Consumer
from funckit.provider import Provider
from funckit.inout import InoutFunction, Ref
from funckit.combinators import (
    pipe, pipeline, compose, composition, concatenate, chain,
    identity, const, curry, curry2, uncurry, flip,
)
from funckit.sequences import (
    map_with, filter_by, flat_map, compact_map, reduce_with,
    sorted_by, sort_by, map_optional, update_each,
)
from funckit.result import (
    Result, Success, Failure,
    bind, unwrap_or_raise,
)
from funckit.errors import ConfigError
from funckit.config import (
    FunckitConfig, LoggingConfig,
    get_config, set_config, configure,
    load_yaml, parse_config, load_config, merge_config,
)
from funckit.logger import setup_logger

__version__ = "0.1.0"

__all__ = [
    # Function types
    "Function", "Predicate", "Comparator", "Ordering",
    "Consumer", "Provider", "InoutFunction", "Ref",
    # Pipeline
    "pipe", "pipeline", "compose", "composition", "concatenate", "chain",
    "identity", "const", "curry", "curry2", "uncurry", "flip",
    # Sequences
    "map_with", "filter_by", "flat_map", "compact_map", "reduce_with",
    "sorted_by", "sort_by", "map_optional", "update_each",
    # Result
    "Result", "Success", "Failure",
    "bind", "unwrap_or_raise",
    # Errors
    "ConfigError",
    # Config
    "FunckitConfig", "LoggingConfig",
    "get_config", "set_config", "configure",
    "load_yaml", "parse_config", "load_config", "merge_config",
    # Logging
    "setup_logger",
]
