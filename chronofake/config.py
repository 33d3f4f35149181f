"""
Configuration Management Module

Handles loading, validation, and merging of configuration files
with support for presets and user-defined overrides.
"""

import yaml
from faker.config import AVAILABLE_LOCALES
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, asdict
from copy import deepcopy
import logging

logger = logging.getLogger(__name__)

PRESETS_DIR = Path(__file__).parent / "presets"

COLUMN_KINDS = ["past", "future", "soon", "recent", "between", "duration"]


@dataclass
class GenerationConfig:
    """Configuration for batch generation"""
    num_rows: int = 1000
    seed: Optional[int] = None
    locale: str = "en_US"


@dataclass
class TemporalConfig:
    """Default windows for the temporal generators"""
    timezone: str = "UTC"
    past_days: int = 100
    future_days: int = 100
    soon_days: int = 10
    recent_days: int = 10
    duration_max_days: int = 7
    date_format: Optional[str] = None


@dataclass
class Config:
    """Main configuration class combining all sub-configurations"""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    temporal: TemporalConfig = field(default_factory=TemporalConfig)

    # Column recipes: name -> {"kind": ..., policy parameters}
    column_configs: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    def merge(self, other: 'Config') -> 'Config':
        """Merge another configuration into this one (other takes precedence)"""
        merged = deepcopy(self)

        for key in ['generation', 'temporal']:
            other_config = getattr(other, key)
            merged_config = getattr(merged, key)

            # Update non-None values
            for field_name, field_value in asdict(other_config).items():
                if field_value is not None:
                    setattr(merged_config, field_name, field_value)

        merged.column_configs.update(other.column_configs)

        return merged


class ConfigLoader:
    """Loads and manages configuration from various sources"""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the configuration loader

        Args:
            config_dir: Directory containing preset YAML files
        """
        self.config_dir = PRESETS_DIR if config_dir is None else Path(config_dir)
        self.presets = self._load_presets()

    def _load_presets(self) -> Dict[str, Config]:
        """Load all available preset configurations"""
        presets = {}

        if not self.config_dir.exists():
            logger.warning(f"Config directory not found: {self.config_dir}")
            return presets

        for preset_file in sorted(self.config_dir.glob("*.yaml")):
            preset_name = preset_file.stem
            try:
                presets[preset_name] = self.load_from_file(preset_file)
                logger.debug(f"Loaded preset: {preset_name}")
            except (OSError, yaml.YAMLError, TypeError) as e:
                logger.error(f"Failed to load preset {preset_name}: {e}")

        return presets

    def load_from_file(self, filepath: Union[str, Path]) -> Config:
        """
        Load configuration from a YAML file

        Args:
            filepath: Path to the YAML configuration file

        Returns:
            Config object
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(filepath, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        return self._dict_to_config(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> Config:
        return self._dict_to_config(config_dict)

    def load_preset(self, preset_name: str) -> Config:
        """
        Load a preset configuration by name

        Args:
            preset_name: Name of the preset (e.g., 'default', 'near_term')

        Returns:
            Config object
        """
        if preset_name not in self.presets:
            available = ", ".join(self.presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available: {available}")

        return deepcopy(self.presets[preset_name])

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> Config:
        """Convert dictionary to Config object"""
        config = Config()

        config_mapping = {
            'generation': GenerationConfig,
            'temporal': TemporalConfig,
        }

        for key, config_class in config_mapping.items():
            if key in config_dict:
                setattr(config, key, config_class(**config_dict[key]))

        if 'column_configs' in config_dict:
            config.column_configs = config_dict['column_configs'] or {}

        return config

    def merge_configs(self, base: Config, override: Union[Config, Dict[str, Any], str]) -> Config:
        """
        Merge configurations with override taking precedence

        Args:
            base: Base configuration
            override: Override configuration (Config object, dict, or preset name)

        Returns:
            Merged Config object
        """
        if isinstance(override, str):
            override = self.load_preset(override)
        elif isinstance(override, dict):
            override = self.load_from_dict(override)

        return base.merge(override)

    def save_config(self, config: Config, filepath: Union[str, Path]):
        """
        Save configuration to a YAML file

        Args:
            config: Configuration to save
            filepath: Path to save the file
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to: {filepath}")

    def list_presets(self) -> List[str]:
        """Get list of available preset names"""
        return list(self.presets.keys())


class ConfigValidator:
    """Validates configuration parameters"""

    @staticmethod
    def validate(config: Config) -> tuple[bool, List[str]]:
        """
        Validate configuration parameters

        Args:
            config: Configuration to validate

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if config.generation.num_rows <= 0:
            errors.append("num_rows must be positive")

        for name in ['past_days', 'future_days', 'soon_days', 'recent_days', 'duration_max_days']:
            if getattr(config.temporal, name) < 0:
                errors.append(f"temporal.{name} must not be negative")

        if not config.temporal.timezone:
            errors.append("temporal.timezone must be set")

        if config.generation.locale not in AVAILABLE_LOCALES:
            errors.append(f"generation.locale '{config.generation.locale}' is not a Faker locale")

        for column_name, column_config in config.column_configs.items():
            _, column_errors = ConfigValidator.validate_column_config(column_name, column_config)
            errors.extend(column_errors)

        return len(errors) == 0, errors

    @staticmethod
    def validate_column_config(column_name: str, column_config: Dict[str, Any]) -> tuple[bool, List[str]]:
        """
        Validate a column recipe

        Args:
            column_name: Name of the column
            column_config: Recipe dictionary

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        kind = column_config.get('kind')
        if kind not in COLUMN_KINDS:
            errors.append(f"{column_name}: kind must be one of {COLUMN_KINDS}")
        elif kind == 'between':
            if 'start' not in column_config or 'end' not in column_config:
                errors.append(f"{column_name}: between needs start and end")

        return len(errors) == 0, errors


def get_default_config() -> Config:
    """Get the default configuration"""
    return Config()
