import re
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from pathlib import Path

from .exceptions import ConfigurationError

_RE_PERIOD = re.compile(r"\d{6}", re.ASCII)


@dataclass(frozen=True)
class Config:
    period: str  # YYYYMM
    file_path: Path


def validate_period(period: str) -> None:
    if not _RE_PERIOD.fullmatch(period):
        raise ConfigurationError("invalid period format: period must be in YYYYMM format")
    try:
        datetime.strptime(period, "%Y%m")
    except ValueError as e:
        raise ConfigurationError("invalid period format: invalid year/month combination") from e


def validate_file_path(path: Path) -> None:
    if not path.exists():
        raise ConfigurationError("invalid file path: file does not exist")
    if path.is_dir():
        raise ConfigurationError("invalid file path: path points to a directory, not a file")
    if path.suffix != ".csv":
        raise ConfigurationError("invalid file path: file must be a CSV file")


def load_config(period: str, file_path: str | PathLike[str]) -> Config:
    """Validate the command-line inputs and bundle them into a ``Config``."""
    path = Path(file_path)
    validate_period(period)
    validate_file_path(path)
    return Config(period=period, file_path=path)
