"""
Pydantic models for lazy list configuration and declarative pipelines.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict


DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s'


class LazyListSettings(BaseModel):
    """Runtime settings shared by every LazyList."""
    repr_preview: int = Field(
        10,
        description="Maximum number of realized elements shown by repr()",
        ge=0
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level name for the lazy list loggers"
    )
    log_format: str = Field(
        DEFAULT_LOG_FORMAT,
        description="logging format string"
    )
    log_file: Optional[str] = Field(
        None,
        description="Optional file that receives log records as well as stdout"
    )

    model_config = ConfigDict(validate_assignment=True)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Accept any standard logging level name, case-insensitively."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level


class OperationType(str, Enum):
    """Pipeline steps understood by utils.process_lazy_operations()"""
    MAP = "map"
    FILTER = "filter"
    TAKE = "take"
    DROP = "drop"
    TAKE_WHILE = "take_while"
    DROP_WHILE = "drop_while"
    NUB = "nub"
    SCANL1 = "scanl1"


FUNCTION_OPERATIONS = {
    OperationType.MAP, OperationType.FILTER, OperationType.TAKE_WHILE,
    OperationType.DROP_WHILE, OperationType.SCANL1,
}
COUNT_OPERATIONS = {OperationType.TAKE, OperationType.DROP}


class LazyOperation(BaseModel):
    """One declarative step of a lazy pipeline."""
    type: OperationType = Field(..., description="Operation to apply")
    function: Optional[Callable[..., Any]] = Field(
        None,
        description="Function or predicate for map/filter/take_while/drop_while/scanl1"
    )
    count: Optional[int] = Field(
        None,
        description="Element count for take/drop",
        ge=0
    )

    @model_validator(mode='after')
    def validate_arguments(self):
        """Each operation type needs exactly the argument it consumes."""
        if self.type in FUNCTION_OPERATIONS and self.function is None:
            raise ValueError(f"{self.type.value} requires a function")
        if self.type in COUNT_OPERATIONS and self.count is None:
            raise ValueError(f"{self.type.value} requires a count")
        return self


_settings = LazyListSettings()


def get_settings() -> LazyListSettings:
    """Return the active settings."""
    return _settings


def set_settings(settings: LazyListSettings) -> None:
    global _settings
    _settings = settings
