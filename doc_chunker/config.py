"""
Configuration management for the chunking engine.

SplitterConfig is the validated, immutable set of sizing parameters shared by
every split strategy. ChunkerConfig loads config.yaml with validation and
environment overrides and builds SplitterConfig / splitter instances from it.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple
import yaml
from dotenv import load_dotenv

from doc_chunker.length import LENGTH_MEASURES, character_length


DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_SEPARATORS: Tuple[str, ...] = ('\n\n', '\n', '. ', ' ', '')


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass(frozen=True)
class SplitterConfig:
    """
    Sizing parameters for a text splitter.

    Enforces:
    - chunk_size >= 1
    - chunk_overlap >= 0
    - chunk_overlap < chunk_size
    - at least one separator

    Invalid values raise ConfigError; nothing is clamped.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP
    length_function: Callable[[str], int] = character_length
    separators: Tuple[str, ...] = DEFAULT_SEPARATORS
    keep_separator: bool = False

    def __post_init__(self):
        """Validate sizing invariants."""
        if not _is_int(self.chunk_size) or self.chunk_size < 1:
            raise ConfigError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")
        if not _is_int(self.chunk_overlap) or self.chunk_overlap < 0:
            raise ConfigError(f"chunk_overlap must be a non-negative integer, got {self.chunk_overlap!r}")
        if self.chunk_overlap >= self.chunk_size:
            raise ConfigError(
                f"chunk_overlap must be less than chunk_size "
                f"(chunk_overlap={self.chunk_overlap}, chunk_size={self.chunk_size})"
            )
        if not callable(self.length_function):
            raise ConfigError("length_function must be callable")
        if isinstance(self.separators, str) or not self.separators:
            raise ConfigError("separators must be a non-empty sequence of strings")
        # Lists are accepted but stored as a tuple so the config stays hashable
        object.__setattr__(self, 'separators', tuple(self.separators))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def get_length_function(name: str) -> Callable[[str], int]:
    """
    Look up a length measure by its config name.

    Args:
        name: 'characters' or 'tokens'

    Returns:
        Length function

    Raises:
        ConfigError: If the name is unknown
    """
    try:
        return LENGTH_MEASURES[name]
    except KeyError:
        raise ConfigError(
            f"Unknown length measure: {name} "
            f"(expected one of {', '.join(sorted(LENGTH_MEASURES))})"
        )


class ChunkerConfig:
    """
    File-based configuration with strict validation.

    Enforces:
    - Required keys present
    - Integer sizes
    - Known strategy and length measure
    """

    # Required top-level keys
    REQUIRED_KEYS = ['splitter']

    STRATEGIES = ('character', 'recursive', 'token')

    # Environment variable -> (splitter key, converter)
    ENV_OVERRIDES = {
        'CHUNKER_CHUNK_SIZE': ('chunk_size', int),
        'CHUNKER_CHUNK_OVERLAP': ('chunk_overlap', int),
        'CHUNKER_STRATEGY': ('strategy', str),
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Load and validate configuration.

        Args:
            config_path: Path to config.yaml. Defaults to $CHUNKER_CONFIG_PATH
                or ./configs/config.yaml

        Raises:
            ConfigError: If config invalid or file missing
        """
        load_dotenv()

        if config_path is None:
            config_path = os.getenv("CHUNKER_CONFIG_PATH", "./configs/config.yaml")

        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise ConfigError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r') as f:
                self.data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}")

        if not isinstance(self.data, dict):
            raise ConfigError(f"Config root must be a mapping: {self.config_path}")

        self._apply_env_overrides()
        self._validate()

    def _apply_env_overrides(self):
        """Apply CHUNKER_* environment variables on top of the file values."""
        splitter_cfg = self.data.get('splitter')
        if not isinstance(splitter_cfg, dict):
            return

        for env_name, (key, convert) in self.ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw is None:
                continue
            try:
                splitter_cfg[key] = convert(raw)
            except ValueError:
                raise ConfigError(f"Invalid value for {env_name}: {raw!r}")

    def _validate(self):
        """Validate configuration structure and values."""
        for key in self.REQUIRED_KEYS:
            if key not in self.data:
                raise ConfigError(f"Missing required config key: {key}")

        splitter_cfg = self.data['splitter']
        if not isinstance(splitter_cfg, dict):
            raise ConfigError("splitter section must be a mapping")

        strategy = splitter_cfg.get('strategy', 'recursive')
        if strategy not in self.STRATEGIES:
            raise ConfigError(f"Invalid splitter strategy: {strategy}")

        for key in ('chunk_size', 'chunk_overlap'):
            if key in splitter_cfg and not _is_int(splitter_cfg[key]):
                raise ConfigError(f"splitter.{key} must be an integer, got {splitter_cfg[key]!r}")

        get_length_function(splitter_cfg.get('length_measure', 'characters'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value by dot-notation path.

        Args:
            key: Key path (e.g., 'splitter.chunk_size', 'audit_log.file')
            default: Default value if not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.data

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_splitter_section(self) -> Dict[str, Any]:
        """Get splitter configuration section."""
        return self.data.get('splitter', {})

    def get_audit_config(self) -> Dict[str, Any]:
        """Get audit logging configuration section."""
        return self.data.get('audit_log', {'enabled': False, 'file': './audit.log'})

    def get_strategy(self) -> str:
        """Get split strategy name."""
        return self.get_splitter_section().get('strategy', 'recursive')

    def splitter_config(self) -> SplitterConfig:
        """Build a validated SplitterConfig from the splitter section."""
        return splitter_config_from_dict(self.get_splitter_section())

    def build_splitter(self):
        """Build the configured split strategy."""
        from doc_chunker.splitter import build_splitter

        section = self.get_splitter_section()
        kwargs = {}
        if self.get_strategy() == 'character' and 'separator' in section:
            kwargs['separator'] = section['separator']
        return build_splitter(self.get_strategy(), self.splitter_config(), **kwargs)


def splitter_config_from_dict(section: Dict[str, Any]) -> SplitterConfig:
    """
    Build a SplitterConfig from a plain dict (e.g. the YAML splitter section).

    Unknown keys are ignored; missing keys fall back to the defaults.

    Raises:
        ConfigError: If any value is invalid
    """
    separators = section.get('separators', DEFAULT_SEPARATORS)
    if isinstance(separators, str) or not isinstance(separators, (list, tuple)):
        raise ConfigError(f"splitter.separators must be a list, got {separators!r}")

    return SplitterConfig(
        chunk_size=section.get('chunk_size', DEFAULT_CHUNK_SIZE),
        chunk_overlap=section.get('chunk_overlap', DEFAULT_CHUNK_OVERLAP),
        length_function=get_length_function(section.get('length_measure', 'characters')),
        separators=tuple(separators),
        keep_separator=bool(section.get('keep_separator', False)),
    )


# Global config instance (lazy-loaded)
_config_instance: Optional[ChunkerConfig] = None


def load_config(config_path: Optional[str] = None) -> ChunkerConfig:
    """
    Load or retrieve cached configuration.

    Args:
        config_path: Optional override path

    Returns:
        ChunkerConfig instance
    """
    global _config_instance
    if _config_instance is None or config_path is not None:
        _config_instance = ChunkerConfig(config_path)
    return _config_instance


def get_config() -> ChunkerConfig:
    """Get currently loaded config (must be initialized)."""
    global _config_instance
    if _config_instance is None:
        raise RuntimeError("Config not loaded. Call load_config() first.")
    return _config_instance
