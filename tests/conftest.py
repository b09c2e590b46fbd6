import pytest

from athlete.auth import Authenticator

from constants import ENDPOINT, FIXED_NOW, PRIVATE_KEY, PUBLIC_KEY


@pytest.fixture
def auth():
    """Authenticator with a frozen clock."""
    return Authenticator(PUBLIC_KEY, PRIVATE_KEY, ENDPOINT, clock=lambda: FIXED_NOW)


@pytest.fixture
def config_file(tmp_path):
    """A YAML config with one complete and one broken profile."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "production:\n"
        f"  endpoint: {ENDPOINT}\n"
        f"  public_key: {PUBLIC_KEY}\n"
        f"  private_key: {PRIVATE_KEY}\n"
        "  timeout: 5\n"
        "broken:\n"
        f"  endpoint: {ENDPOINT}\n"
        f"  public_key: {PUBLIC_KEY}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a config file and return its path."""
    def _write(text):
        path = tmp_path / "custom.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
