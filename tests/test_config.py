"""
Tests for environment-driven settings
"""

from bookshelf.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 4000
    assert settings.seed_sample_data is True
    assert settings.strict_author_references is False


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_STRICT_AUTHOR_REFERENCES", "true")
    monkeypatch.setenv("BOOKSHELF_API_PORT", "5050")

    settings = Settings(_env_file=None)

    assert settings.strict_author_references is True
    assert settings.api_port == 5050
