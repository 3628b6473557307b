import pytest

from jobportal_config import deps

SECURE_SECRET = "correct-horse-battery-staple"


@pytest.fixture
def missing_env_file(tmp_path):
    """Path of an overlay file that does not exist."""
    return tmp_path / "absent.env"


@pytest.fixture
def secure_env():
    """Smallest environment that passes validation."""
    return {"JWT_SECRET": SECURE_SECRET}


@pytest.fixture(autouse=True)
def _fresh_config_holder():
    deps.reset_config()
    yield
    deps.reset_config()
