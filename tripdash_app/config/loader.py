"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    ActionItemParams,
    CalendarParams,
    ContractParams,
    DefaultConfig,
    StatisticsParams,
    UpcomingParams,
    get_default_config,
)

_SECTION_TYPES = {
    "calendar": CalendarParams,
    "contracts": ContractParams,
    "action_items": ActionItemParams,
    "upcoming": UpcomingParams,
    "statistics": StatisticsParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_organizations(self) -> dict[str, Any]:
        """Load the organization id to overrides mapping from organizations.yaml."""
        organizations_file = self.config_dir / "organizations.yaml"

        if not organizations_file.exists():
            return {}

        with open(organizations_file) as f:
            organizations_config = yaml.safe_load(f) or {}

        organizations = {}
        if isinstance(organizations_config, dict):
            organizations = organizations_config.get("organizations") or {}

        if not isinstance(organizations_config, dict) or not isinstance(organizations, dict):
            raise ConfigurationError(
                "organizations.yaml must map 'organizations' to per-organization overrides",
                context={"config_file": str(organizations_file)},
            )

        return organizations

    def load_organization_config(self, organization_id: str) -> dict[str, Any]:
        """Load organization-specific configuration overrides."""
        organization_config = self.load_organizations().get(organization_id) or {}

        if not isinstance(organization_config, dict):
            raise ConfigurationError(
                f"Overrides for {organization_id} must be a mapping, got {type(organization_config).__name__}",
                organization_id=organization_id,
            )

        return organization_config

    def merge_config(
        self,
        organization_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Organization-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if organization_id:
            organization_config = self.load_organization_config(organization_id)
            config = self._deep_merge(config, organization_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(merged: dict[str, Any]) -> DefaultConfig:
    """
    Build a typed configuration from a merged configuration dict.

    Unknown sections and keys are ignored; missing ones keep their defaults.
    """
    sections = {}
    for section_name, section_type in _SECTION_TYPES.items():
        values = merged.get(section_name) or {}
        known = {f.name for f in fields(section_type)}
        sections[section_name] = section_type(
            **{key: value for key, value in values.items() if key in known}
        )
    return DefaultConfig(**sections)
