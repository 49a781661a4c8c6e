"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests
    │   ├── credgate_auth/ # Password hashing, tokens, persistence
    │   ├── credgate_config/
    │   ├── application/   # Authenticator
    │   └── presentation/  # CLI
    └── integration/       # API tests through the FastAPI app
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from credgate_auth import Credential, digest
from credgate_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that run the full API stack",
    )


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Settings are cached per process; isolate tests from each other."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def damian() -> Credential:
    """Credential stored with the legacy SHA-256 digest of "qwerty"."""
    return Credential(
        id=1,
        username="damian",
        email="damian@wp.pl",
        password_hash=digest("qwerty"),
    )
