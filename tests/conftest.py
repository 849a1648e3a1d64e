"""Root conftest: shared test configuration."""

import os

# Tests build their own stores; never seed the module-level app
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")
