#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bscdev_app.config.loader import ConfigLoader
from bscdev_app.config.secrets import load_secrets
from bscdev_app.config.validation import ConfigValidator
from bscdev_app.errors import ConfigurationError
from bscdev_app.logging import configure_logging


def main():
    """Main validation function."""
    configure_logging(level="ERROR")
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print(f"🔍 Validating bscdev configuration in {config_dir}...")

    loader = ConfigLoader.create(config_dir)

    try:
        secrets = load_secrets(loader.secrets_path)
        config = loader.apply_secrets(loader.merge_config(), secrets)
    except ConfigurationError as e:
        print(f"❌ Cannot read configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print(f"✅ Compilers: {', '.join(c['version'] for c in config['compilers'])}")
    for name, network in config["networks"].items():
        accounts = network.get("accounts") or []
        signers = accounts if accounts == "remote" else len(accounts)
        print(f"✅ Network {name}: chain_id={network.get('chain_id')} signers={signers}")

    if not secrets.present():
        print("⚠️  No secrets supplied, every network runs without signers")

    print("\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
