import logging
import os
from typing import List, Callable, Generic, TypeVar

from indenty.doc import DEFAULT_WIDTH
from indenty.lines import DEFAULT_INDENT

T = TypeVar('T')


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"must be an integer, got {value!r}")
    if number <= 0:
        raise ValueError(f"must be positive, got {number}")
    return number


def log_level(value: str) -> int:
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"must be a logging level like DEBUG or WARNING, got {value!r}")
    return level


class EnvVariable(Generic[T]):
    """
    An environment variable with a default, and a converter that turns its raw value into what the code uses
    """
    registry: List['EnvVariable'] = []

    def __init__(self, env_name: str, default: str, description: str, converter: Callable[[str], T]):
        self.env_name = env_name
        self.default = default
        self.description = description
        self.converter = converter

        self.registry.append(self)

    def get_value(self) -> str:
        return os.environ.get(self.env_name, self.default)

    def get(self) -> T:
        """Raises `ValueError` naming the variable if its value can't be converted"""
        try:
            return self.converter(self.get_value())
        except ValueError as e:
            raise ValueError(f"{self.env_name} {str(e)}") from e


WIDTH_ENV: EnvVariable[int] = EnvVariable(
    'INDENTY_WIDTH', str(DEFAULT_WIDTH),
    description=f"Width used when rendering trees. Default: {DEFAULT_WIDTH}",
    converter=positive_int
)
INDENT_ENV: EnvVariable[str] = EnvVariable(
    'INDENTY_INDENT', DEFAULT_INDENT,
    description='Indentation used for each level by `indenty flatten`. Default: two spaces',
    converter=str
)
LOG_LEVEL_ENV: EnvVariable[int] = EnvVariable(
    'INDENTY_LOG_LEVEL', 'WARNING',
    description='Logging level (DEBUG, INFO, WARNING, ...). Default: WARNING',
    converter=log_level
)


def get_width() -> int:
    return WIDTH_ENV.get()


def get_log_level() -> int:
    return LOG_LEVEL_ENV.get()


def env_help() -> str:
    """Describes every environment variable, for the bottom of `--help`"""
    lines = ['environment variables:']
    for env_variable in EnvVariable.registry:
        lines.append(f"  {env_variable.env_name}: {env_variable.description}")
    return '\n'.join(lines)
