"""
ORM profiling configuration.

Holds the parameters that make the database layer emit marker-tagged log
lines, plus the application class map consulted during caller attribution.
"""
from typing import Any, Dict, Mapping, Optional

CLASSMAP_PREFIX = "classmap."

PROFILED_METHODS = [
    'PropelPDO::__construct',       # connection opening
    'PropelPDO::__destruct',        # connection close
    'PropelPDO::exec',              # query
    'PropelPDO::query',             # query
    'PropelPDO::beginTransaction',  # transaction begin
    'PropelPDO::commit',            # transaction commit
    'PropelPDO::rollBack',          # transaction rollBack (capital 'B')
    'DebugPDOStatement::execute',   # query from a prepared statement
]


class ProfilingConfiguration:
    """Parameter store, nested mappings are exposed as dotted keys when flattened"""

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self.parameters: Dict[str, Any] = {}
        for key, value in (parameters or {}).items():
            self.set_parameter(key, value)

    def set_parameter(self, key: str, value: Any, auto_flatten_arrays: bool = True) -> None:
        """
        Store a parameter.

        Args:
            key: Dotted parameter name
            value: Parameter value
            auto_flatten_arrays: When False the value is kept as a single
                                 opaque entry even if it is a mapping or list
        """
        if auto_flatten_arrays and isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                self.set_parameter(f"{key}.{sub_key}", sub_value)
            return
        self.parameters[key] = value

    def get_parameter(self, key: str, default: Any = None) -> Any:
        return self.parameters.get(key, default)

    def get_flat_parameters(self) -> Dict[str, Any]:
        return dict(self.parameters)

    def class_map(self) -> Dict[str, Any]:
        """Classes that belong to the active application, keyed by class name."""
        return {
            key[len(CLASSMAP_PREFIX):]: value
            for key, value in self.parameters.items()
            if key.startswith(CLASSMAP_PREFIX)
        }


def enable_profiling(config: ProfilingConfiguration) -> ProfilingConfiguration:
    """
    Set the options the ORM needs to emit query log lines with method,
    time and memory details.
    """
    config.set_parameter('debugpdo.logging.details.method.enabled', True)
    config.set_parameter('debugpdo.logging.details.time.enabled', True)
    config.set_parameter('debugpdo.logging.details.mem.enabled', True)
    config.set_parameter('debugpdo.logging.methods', list(PROFILED_METHODS), False)
    return config


def is_profiling_enabled(config: ProfilingConfiguration) -> bool:
    return all(
        config.get_parameter(f'debugpdo.logging.details.{detail}.enabled') is True
        for detail in ('method', 'time', 'mem')
    )
