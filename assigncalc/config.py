import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "ASSIGNCALC_"


@dataclass
class ConfigError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"[Config error] {self.errmsg}"


@dataclass(frozen=True)
class Config:
    precision: int = 6
    log_level: str = "WARNING"
    verbose: bool = False


def _parse_precision(raw: str) -> int:
    try:
        precision = int(raw)
    except ValueError:
        raise ConfigError(f"Precision must be an integer, got {raw!r}")
    if precision < 0:
        raise ConfigError(f"Precision must not be negative, got {precision}")
    return precision


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level {raw!r}")
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Builds a Config from ASSIGNCALC_* variables, falling back to defaults"""
    if environ is None:
        environ = os.environ
    defaults = Config()
    precision = environ.get(ENV_PREFIX + "PRECISION")
    log_level = environ.get(ENV_PREFIX + "LOG_LEVEL")
    verbose = environ.get(ENV_PREFIX + "VERBOSE", "")
    return Config(
        precision=_parse_precision(precision) if precision is not None else defaults.precision,
        log_level=_parse_log_level(log_level) if log_level is not None else defaults.log_level,
        verbose=verbose.strip().lower() in {"1", "true", "yes", "on"},
    )
