"""
Runtime configuration for the algorithm suite.

Settings can be built directly, from a mapping validated against a JSON
schema, or from ``DISCRETE_*`` environment variables. A process-wide default
is used by every algorithm that is not handed an explicit configuration.
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError
from .memory import MemoryManager

logger = logging.getLogger(__name__)

ENV_PREFIX = "DISCRETE_"

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "strict_prim": {"type": "boolean"},
        "recursive_tarjan": {"type": "boolean"},
        "max_memory_mb": {"type": ["number", "null"], "exclusiveMinimum": 0},
    },
    "additionalProperties": False,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AlgorithmConfig:
    """
    Tunables shared by the graph algorithms.

    Attributes:
        strict_prim (bool): Make Prim raise on a disconnected source instead of
            returning the spanning tree of the seed's component
        recursive_tarjan (bool): Try the recursive SCC traversal before the
            explicit-stack one
        max_memory_mb (Optional[float]): Memory growth budget for the SCC and
            dominator computations; ``None`` means unlimited
    """

    strict_prim: bool = False
    recursive_tarjan: bool = True
    max_memory_mb: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AlgorithmConfig":
        """
        Build a configuration from a mapping.

        Raises:
            ConfigurationError: If the mapping does not match ``CONFIG_SCHEMA``
        """
        try:
            json_validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(e.message) from e
        return cls(**data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AlgorithmConfig":
        """
        Build a configuration from ``DISCRETE_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        for key in ("strict_prim", "recursive_tarjan"):
            raw = environ.get(ENV_PREFIX + key.upper())
            if raw is not None:
                data[key] = _parse_bool(key, raw)

        raw = environ.get(ENV_PREFIX + "MAX_MEMORY_MB")
        if raw is not None and raw.strip():
            try:
                data["max_memory_mb"] = float(raw)
            except ValueError:
                raise ConfigurationError(f"max_memory_mb must be a number, got {raw!r}")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def memory_manager(self) -> MemoryManager:
        """Create a memory guard honouring ``max_memory_mb``."""
        return MemoryManager(self.max_memory_mb)


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")


_default_config = AlgorithmConfig()


def get_config() -> AlgorithmConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_config(config: AlgorithmConfig) -> None:
    """Replace the process-wide default configuration."""
    global _default_config
    logger.debug("Algorithm configuration set to %s", config)
    _default_config = config
