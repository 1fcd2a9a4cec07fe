from aneslink.config.settings import CORS_HEADERS, get_deepseek_api_key

def test_api_key_read_at_call_time(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-first")
    assert get_deepseek_api_key() == "sk-first"

    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-second")
    assert get_deepseek_api_key() == "sk-second"

def test_blank_api_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "   ")
    assert get_deepseek_api_key() is None

    monkeypatch.delenv("DEEPSEEK_API_KEY")
    assert get_deepseek_api_key() is None

def test_cors_headers():
    assert CORS_HEADERS["Access-Control-Allow-Origin"] == "*"
    assert CORS_HEADERS["Access-Control-Allow-Methods"] == "POST, OPTIONS"
