from __future__ import annotations

from typing import Any, Generic

from social_insights.common.config import TConf


class ComponentFactory(Generic[TConf]):
    """Base class for configurable components."""

    # This is a class variable that will be set by subclasses
    _config_type: type[TConf]
    _instance_config: TConf

    def __init__(self, config: TConf) -> None:
        """Initialize with configuration."""
        self._instance_config = config

    @classmethod
    def from_config(cls, config: TConf | dict[str, Any] | None = None, **kwargs: Any):
        """Create a component from a configuration object or dictionary."""
        if not isinstance(config, cls._config_type):
            config = cls._config_type.model_validate(config or {})
        return cls(config, **kwargs)

    @property
    def config(self) -> TConf:
        """Access the configuration."""
        return self._instance_config
