"""Test the command-line tools."""

from modlocale.cli import main


def test_check_builtin_catalog(capsys):
    assert main(["check"]) == 0
    out = capsys.readouterr().out
    assert "Primary locale: en" in out


def test_locales_lists_native_names(capsys):
    assert main(["locales"]) == 0
    out = capsys.readouterr().out
    assert "日本語" in out
    assert "en\tEnglish (primary)" in out


def test_show_formats_key(capsys):
    assert main(["show", "--locale", "ja", "UI_ItemCount", "3"]) == 0
    assert "個数: 3" in capsys.readouterr().out


def test_show_unsupported_locale_falls_back(capsys):
    assert main(["show", "--locale", "de", "Settings_Title"]) == 0
    assert "Radial Menu Settings" in capsys.readouterr().out


def test_check_reports_extra_keys(tmp_path, capsys):
    extra = tmp_path / "extra.yaml"
    extra.write_text("ko:\n  Only_In_Korean: 한국어\n", encoding="utf-8")
    config = tmp_path / "base.yaml"
    config.write_text(f"localization:\n  extra_catalogs:\n    - {extra}\n", encoding="utf-8")

    assert main(["--config", str(config), "check"]) == 1
    assert "Only_In_Korean" in capsys.readouterr().out


def test_missing_config_is_reported(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml"), "check"]) == 2


def test_bad_catalog_is_reported(tmp_path):
    config = tmp_path / "base.yaml"
    config.write_text(f"localization:\n  extra_catalogs:\n    - {tmp_path / 'nope.yaml'}\n", encoding="utf-8")
    assert main(["--config", str(config), "show", "Settings_Title"]) == 1


def test_log_level_flag_overrides_config(tmp_path, monkeypatch):
    config = tmp_path / "base.yaml"
    config.write_text("logging:\n  level: INFO\n", encoding="utf-8")
    applied = {}
    monkeypatch.setattr("modlocale.cli.configure_logging", lambda cfg: applied.update(cfg["logging"]))

    assert main(["--config", str(config), "--log-level", "DEBUG", "locales"]) == 0
    assert applied["level"] == "DEBUG"


def test_unvalidated_config_without_localization_uses_defaults(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("STRICT_CONFIG", "0")
    config = tmp_path / "base.yaml"
    config.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    assert main(["--config", str(config), "show", "Settings_Title"]) == 0
    assert "Radial Menu Settings" in capsys.readouterr().out
