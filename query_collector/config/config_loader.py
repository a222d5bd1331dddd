"""
Configuration loader for the query collector.

This module provides the ConfigLoader class for loading and validating
collector configuration from YAML files.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from query_collector.config.collector_config import CollectorConfig
from query_collector.config.profiling_config import ProfilingConfiguration, enable_profiling
from query_collector.exceptions import ConfigurationError
from query_collector.util.log_config import setup_logger

DOCUMENT_ROOT_ENV = "DOCUMENT_ROOT"

logger = setup_logger(__name__)


class ConfigLoader:

    def __init__(self, config_path: Path, env: str = None):
        self.config_path = Path(config_path)
        self.env = env
        self.raw_data = self._read_yaml()
        self.config_data = self._load_config()

    def _read_yaml(self) -> Dict[str, Any]:
        """
        Read config.yaml and merge config_<env>.yaml on top of it.

        Raises:
            FileNotFoundError: If a configuration file doesn't exist
            ConfigurationError: If a file does not hold a mapping
        """
        base_config_file = self.config_path / "config.yaml"
        data = self._read_mapping(base_config_file)

        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            # dict.update() will overwrite existing keys
            data.update(self._read_mapping(env_config_file))
            logger.info(f"Loaded configuration override: {env_config_file.name}")

        return data

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path.name} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_config(self) -> CollectorConfig:
        """
        Build the CollectorConfig from the merged YAML data.

        Returns:
            CollectorConfig: Configured collector configuration instance
        """
        data = self.raw_data
        config = CollectorConfig()

        config.document_root = data.get("document_root") or os.environ.get(DOCUMENT_ROOT_ENV) or os.getcwd()

        if "log_queries_to_logger" in data:
            value = data["log_queries_to_logger"]
            if not isinstance(value, bool):
                raise ConfigurationError(f"log_queries_to_logger must be a boolean, got {value!r}")
            config.log_queries_to_logger = value

        if "query_marker" in data:
            marker = data["query_marker"]
            if not isinstance(marker, str) or not marker:
                raise ConfigurationError("query_marker must be a non-empty string")
            config.query_marker = marker

        if "vendor_markers" in data:
            markers = data["vendor_markers"]
            if not isinstance(markers, list) or not all(isinstance(m, str) and m for m in markers):
                raise ConfigurationError("vendor_markers must be a list of non-empty strings")
            # YAML files are written with '/', match the running platform
            config.vendor_markers = [m.replace("/", os.sep) for m in markers]

        class_map = data.get("classmap", {}) or {}
        if not isinstance(class_map, dict):
            raise ConfigurationError("classmap must be a mapping of class name to file")
        config.class_map = {str(k): str(v) for k, v in class_map.items()}

        logging_data = data.get("logging", {}) or {}
        if not isinstance(logging_data, dict):
            raise ConfigurationError("logging must be a mapping")
        config.log_level = str(logging_data.get("level", config.log_level)).upper()
        if not isinstance(logging.getLevelName(config.log_level), int):
            raise ConfigurationError(f"Unknown logging level: {config.log_level}")
        if logging_data.get("file"):
            config.log_file = Path(logging_data["file"])

        return config

    def get_profiling_configuration(self) -> ProfilingConfiguration:
        """
        Profiling parameters from the 'profiling' section, with the class map
        stored under 'classmap.*' keys. Profiling is switched on unless the
        section sets enabled: false.
        """
        section = self.raw_data.get("profiling", {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError("profiling must be a mapping")

        parameters = dict(section.get("parameters", {}) or {})
        profiling = ProfilingConfiguration(parameters)
        profiling.set_parameter("classmap", self.config_data.class_map)

        if section.get("enabled", True):
            enable_profiling(profiling)
        return profiling

