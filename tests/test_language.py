import pytest
from aneslink.services.language import detect_language, resolve_language

@pytest.mark.parametrize("requested, expected", [
    ("en", "en"),
    ("zh", "zh"),
    (None, "zh"),
    ("EN", "zh"),
    ("English", "zh"),
    ("", "zh"),
])
def test_explicit_policy(requested, expected):
    assert resolve_language("What is the induction dose of propofol?", requested) == expected

@pytest.mark.parametrize("text, expected", [
    ("What is the induction dose of propofol?", "en"),
    ("hello", "zh"),           # exactly 5 letters is not enough
    ("hellos", "en"),
    ("abc def", "en"),
    ("丙泊酚的诱导剂量是多少？", "zh"),
    ("propofol 的诱导剂量", "zh"),
    ("12345 !!!", "zh"),
    ("", "zh"),
])
def test_detect_language(text, expected):
    assert detect_language(text) == expected

def test_detect_policy_ignores_requested_language():
    assert resolve_language("丙泊酚剂量", "en", policy="detect") == "zh"
    assert resolve_language("Sevoflurane MAC value", "zh", policy="detect") == "en"

def test_resolution_is_deterministic():
    results = {resolve_language("Ketamine dosing for children", None, policy="detect") for _ in range(5)}
    assert results == {"en"}
    results = {resolve_language("Ketamine dosing for children", "en") for _ in range(5)}
    assert results == {"en"}
