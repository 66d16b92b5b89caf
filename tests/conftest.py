"""Global test fixtures."""

import os

# Tests must never pick up a developer's YAML config
os.environ.pop("CAREERCRYPT_CONFIG_FILE", None)
