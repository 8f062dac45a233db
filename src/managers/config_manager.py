"""
Config Manager

Loads config/defaults.yaml (with optional include: support) and turns the
per-family sections into validated parameter snapshots.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from models.enums import LogLevel, ParamFamily
from models.errors import ConfigurationError
from models.pattern_params import PatternParams
from services import config_validation
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


@dataclass(frozen=True)
class AppSettings:
    """Host settings from the app: section"""
    width: int = 1920
    height: int = 1080
    fps: int = 60
    log_level: LogLevel = LogLevel.INFO


class ConfigManager:
    """
    YAML configuration loader

    Loads defaults.yaml and processes an optional include: directive to merge
    additional YAML files. A missing or unreadable file falls back to the
    built-in defaults with a logged warning; the engine always starts.

    Example:
        config = ConfigManager()
        config.load()

        snapshots = config.family_snapshots()   # Dict[ParamFamily, PatternParams]
        app = config.app                        # AppSettings
    """

    def __init__(self, config_path: Union[str, Path] = "config/defaults.yaml"):
        """
        Args:
            config_path: Path to the YAML file (relative paths resolve against src/)
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = Path(__file__).parent.parent / path
        self.config_path = path
        self.data: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Returns:
            Merged config data dict (empty when falling back to defaults)
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if not isinstance(main_config, dict):
                raise ConfigurationError(f"Top level of {self.config_path.name} must be a mapping")

            includes = main_config.pop("include", None)
            if includes:
                log.info("Using include-based configuration")
                main_config = self._merge(main_config, self._load_with_includes(includes, self.config_path.parent))

            self.data = main_config
            log.info("Configuration loaded", path=str(self.config_path), sections=str(list(self.data.keys())))

        except (OSError, yaml.YAMLError, ConfigurationError) as ex:
            log.error("Failed to load configuration", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to built-in defaults")
            self.data = {}

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["app.yaml", "families.yaml"])
            config_dir: Directory containing config files
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged = self._merge(merged, file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        return merged

    @staticmethod
    def _merge(base: Dict, extra: Dict) -> Dict:
        """One-level deep merge (section dicts are merged key by key)"""
        merged = dict(base)
        for key, value in extra.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        return merged

    # === Accessors ===

    @property
    def app(self) -> AppSettings:
        section = self.data.get("app") or {}
        defaults = AppSettings()
        level = section.get("log_level", defaults.log_level.name)
        try:
            log_level = LogLevel[str(level).upper()]
        except KeyError:
            log.warn("Unknown log level, using INFO", log_level=level)
            log_level = LogLevel.INFO
        return AppSettings(
            width=int(section.get("width", defaults.width)),
            height=int(section.get("height", defaults.height)),
            fps=int(section.get("fps", defaults.fps)),
            log_level=log_level,
        )

    def family_overrides(self, family: ParamFamily) -> Dict[str, Any]:
        families = self.data.get("families") or {}
        return dict(families.get(family.value) or {})

    def family_snapshot(self, family: ParamFamily) -> PatternParams:
        """
        Validated snapshot for one family; an invalid section is logged and
        replaced by the family defaults.
        """
        try:
            return config_validation.validate(family, self.family_overrides(family))
        except ConfigurationError as ex:
            log.error("Invalid configuration section, using defaults", family=family.value, error=str(ex))
            return config_validation.defaults(family)

    def family_snapshots(self, families: Optional[List[ParamFamily]] = None) -> Dict[ParamFamily, PatternParams]:
        return {family: self.family_snapshot(family) for family in (families or list(ParamFamily))}
