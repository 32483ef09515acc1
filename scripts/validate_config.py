#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from tripdash_app.config.loader import ConfigLoader
from tripdash_app.config.validation import ConfigValidator, ValidationError
from tripdash_app.errors import ConfigurationError


def validate_organization_config(loader: ConfigLoader, organization_id: str) -> list[ValidationError]:
    """Validate configuration for a specific organization."""
    config = loader.merge_config(organization_id)
    return ConfigValidator.validate_config(config)


def configured_organizations(loader: ConfigLoader) -> list[str]:
    """Organization ids listed in organizations.yaml."""
    return list(loader.load_organizations())


def main():
    """Main validation function."""
    print("🔍 Validating TripDash configuration...")

    loader = ConfigLoader.create()
    try:
        organizations = configured_organizations(loader) + ["UNKNOWN-ORGANIZATION"]  # Should use defaults
    except (OSError, yaml.YAMLError, ConfigurationError) as e:
        print(f"❌ Could not read organizations: {e}")
        sys.exit(1)

    all_valid = True

    for organization_id in organizations:
        print(f"\n🏫 Validating {organization_id}...")

        try:
            errors = validate_organization_config(loader, organization_id)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                print(f"✅ {organization_id} configuration is valid")

        except (OSError, yaml.YAMLError, ConfigurationError) as e:
            print(f"❌ Error validating {organization_id}: {e}")
            all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
