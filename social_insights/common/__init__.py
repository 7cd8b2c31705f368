from .component import ComponentFactory
from .config import BaseConfig, LoggingConfig
from .utils import ArrowConverter, CustomEncoder, round_half_away

__all__ = [
    "ArrowConverter",
    "BaseConfig",
    "ComponentFactory",
    "CustomEncoder",
    "LoggingConfig",
    "round_half_away",
]
