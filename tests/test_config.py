import pytest

from debrief_app.core.config import DEFAULT_FALLBACK_GLYPH, DEFAULT_STATUS_GLYPHS, DebriefSettings
from debrief_app.core.errors import ConfigError
from debrief_app.core.status import display_status, load_status_glyphs

ENV = {
    "PD_TOKEN": "t",
    "PD_TEAM_IDS": " P1 , P2,,",
    "JIRA_HOST": "https://jira.example.com",
    "JIRA_USER": "u",
    "JIRA_PASSWORD": "p",
}


def test_settings_from_env():
    settings = DebriefSettings.from_env(ENV)
    assert settings.pd_team_ids == ("P1", "P2")
    assert settings.jira_project == "Core Services"
    assert settings.timezone == "UTC"
    assert settings.status_glyphs_path is None


def test_settings_missing_variables():
    env = dict(ENV)
    del env["JIRA_PASSWORD"]
    env["PD_TOKEN"] = ""
    with pytest.raises(ConfigError, match="PD_TOKEN, JIRA_PASSWORD"):
        DebriefSettings.from_env(env)


def test_settings_require_a_team():
    with pytest.raises(ConfigError):
        DebriefSettings.from_env({**ENV, "PD_TEAM_IDS": " , "})


def test_default_glyphs():
    glyphs = load_status_glyphs()
    assert glyphs.glyph_for("Closed") == "🎉"
    assert glyphs.glyph_for("Blocked") == DEFAULT_FALLBACK_GLYPH
    assert glyphs.decorate("Closed") == "🎉 *Closed*"
    with pytest.raises(TypeError):
        glyphs.glyphs["Closed"] = "x"


def test_glyph_overrides_from_yaml(tmp_path):
    path = tmp_path / "status_glyphs.yaml"
    path.write_text('glyphs:\n  Blocked: "B"\nfallback: "?"\n', encoding="utf-8")
    glyphs = load_status_glyphs(path)
    assert glyphs.glyph_for("Blocked") == "B"
    assert glyphs.glyph_for("In Review") == DEFAULT_STATUS_GLYPHS["In Review"]
    assert glyphs.glyph_for("Triage") == "?"


def test_glyph_file_missing_or_broken(tmp_path):
    assert load_status_glyphs(tmp_path / "absent.yaml").fallback == DEFAULT_FALLBACK_GLYPH
    broken = tmp_path / "broken.yaml"
    broken.write_text("glyphs: [unclosed", encoding="utf-8")
    assert load_status_glyphs(broken).glyphs["Closed"] == "🎉"


def test_display_status_fallback():
    assert display_status(None) == "Unknown Status"
    assert display_status("") == "Unknown Status"
    assert display_status("In Review") == "In Review"


def test_settings_timezone():
    assert DebriefSettings.from_env({**ENV, "DEBRIEF_TIMEZONE": "America/Santiago"}).timezone == "America/Santiago"
    with pytest.raises(ConfigError, match="Mars/Olympus"):
        DebriefSettings.from_env({**ENV, "DEBRIEF_TIMEZONE": "Mars/Olympus"})
