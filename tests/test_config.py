from siacentral.config import (
    DEFAULT_BASE_URL,
    MAX_ADDRESSES,
    MAX_HOSTS_LIMIT,
    ClientConfig,
    _load_timeout,
    load_api_key,
)


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("SIACENTRAL_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() == 30.0  # falls back to default on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("SIACENTRAL_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_timeout_unset(monkeypatch):
    monkeypatch.delenv("SIACENTRAL_HTTP_TIMEOUT", raising=False)
    assert _load_timeout() == 30.0


def test_load_api_key_env_over_file(monkeypatch, tmp_path):
    # Env var wins over file
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key", encoding="utf-8")
    monkeypatch.setenv("SIACENTRAL_API_KEY", " env-key ")
    monkeypatch.setenv("SIACENTRAL_API_KEY_FILE", str(key_file))
    assert load_api_key() == "env-key"


def test_load_api_key_from_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.delenv("SIACENTRAL_API_KEY", raising=False)
    monkeypatch.setenv("SIACENTRAL_API_KEY_FILE", str(key_file))
    assert load_api_key() == "file-key"


def test_load_api_key_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("SIACENTRAL_API_KEY", raising=False)
    monkeypatch.setenv("SIACENTRAL_API_KEY_FILE", str(tmp_path / "missing.txt"))
    assert load_api_key() is None


def test_config_picks_up_key_at_construction(monkeypatch):
    monkeypatch.setenv("SIACENTRAL_API_KEY", "late-key")
    assert ClientConfig().api_key == "late-key"


def test_config_defaults():
    cfg = ClientConfig(api_key=None)
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.max_addresses == MAX_ADDRESSES == 10000
    assert cfg.max_hosts_limit == MAX_HOSTS_LIMIT == 500


def test_with_base_url_returns_copy():
    cfg = ClientConfig(base_url="https://a.example.com", api_key="k", timeout=3.0)
    other = cfg.with_base_url("https://b.example.com")
    assert other.base_url == "https://b.example.com"
    assert other.api_key == "k"
    assert other.timeout == 3.0
    assert cfg.base_url == "https://a.example.com"
