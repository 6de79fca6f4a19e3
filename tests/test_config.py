import locale

import pytest

from swid import BuilderConfig, ConfigError, TagBuilder
from swid.config import locale_language
from swid.logging import log, set_verbosity


def test_locale_language_converts_to_bcp47(monkeypatch):
    monkeypatch.setattr(locale, "getlocale", lambda *a: ("en_US", "UTF-8"))
    assert locale_language() == "en-US"


@pytest.mark.parametrize("name", [None, "C", "POSIX"])
def test_locale_language_falls_back_to_und(monkeypatch, name):
    monkeypatch.setattr(locale, "getlocale", lambda *a: (name, None))
    assert locale_language() == "und"


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SWID_LANGUAGE", "de-DE")
    monkeypatch.setenv("SWID_VERBOSE", "yes")
    cfg = BuilderConfig.from_env()
    assert cfg.language == "de-DE"
    assert cfg.verbose is True
    assert TagBuilder.create(cfg.language_provider()).get_language() == "de-DE"


def test_from_env_reads_dotenv_without_override(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SWID_LANGUAGE=fr-CA\nSWID_VERBOSE=0\n")
    # set first so the value loaded from .env is undone after the test
    monkeypatch.setenv("SWID_LANGUAGE", "")
    monkeypatch.delenv("SWID_LANGUAGE")
    monkeypatch.setenv("SWID_VERBOSE", "true")
    cfg = BuilderConfig.from_env(env_file)
    assert cfg.language == "fr-CA"
    assert cfg.verbose is True


def test_language_provider_defaults_to_locale(monkeypatch):
    monkeypatch.setattr(locale, "getlocale", lambda *a: ("pt_BR", "UTF-8"))
    provider = BuilderConfig().language_provider()
    assert provider() == "pt-BR"


def test_from_file(tmp_path):
    path = tmp_path / "swid.yml"
    path.write_text("language: ja-JP\nverbose: true\n")
    cfg = BuilderConfig.from_file(path)
    assert cfg == BuilderConfig(language="ja-JP", verbose=True)


def test_from_file_empty_gives_defaults(tmp_path):
    path = tmp_path / "swid.yml"
    path.write_text("")
    assert BuilderConfig.from_file(path) == BuilderConfig()


def test_from_file_rejects_unknown_keys_and_bad_types(tmp_path):
    path = tmp_path / "swid.yml"
    path.write_text("language: 42\nextra: x\n")
    with pytest.raises(ConfigError) as exc:
        BuilderConfig.from_file(path)
    msg = str(exc.value)
    assert "language" in msg and "extra" in msg


def test_from_file_missing(tmp_path):
    with pytest.raises(ConfigError):
        BuilderConfig.from_file(tmp_path / "nope.yml")


def test_validation_is_logged(tag, caplog):
    set_verbosity(True)
    with caplog.at_level("DEBUG", logger="swid"):
        tag.validate()
    assert any("acme-app-1.0" in r.getMessage() for r in caplog.records)
    assert log().name == "swid"
