import json

import pytest

from densegrid.src.utils import config_loader


def test_load_yaml_and_json(tmp_path):
    y = tmp_path / "render.yaml"
    y.write_text("color_enabled: false\nneutral_rgb: [1, 2, 3]\n")
    j = tmp_path / "render.json"
    j.write_text(json.dumps({"color_enabled": True}))
    assert config_loader.load_config(str(y)) == {"color_enabled": False, "neutral_rgb": [1, 2, 3]}
    assert config_loader.load_config(str(j)) == {"color_enabled": True}


def test_unsupported_suffix(tmp_path):
    p = tmp_path / "render.toml"
    p.write_text("x = 1")
    with pytest.raises(ValueError):
        config_loader.load_config(str(p))


def test_missing_render_config_is_empty(tmp_path):
    assert config_loader.load_render_config(tmp_path / "absent.yaml") == {}


def test_broken_render_config_warns(tmp_path, caplog):
    p = tmp_path / "broken.yaml"
    p.write_text("highlight: [unclosed\n")
    assert config_loader.load_render_config(p) == {}
    assert any("Could not read render config" in rec.message for rec in caplog.records)


def test_shipped_defaults():
    cfg = config_loader.load_render_config()
    assert cfg.get("neutral_rgb", [192, 192, 192]) == [192, 192, 192]


def test_setters(monkeypatch):
    monkeypatch.setattr(config_loader, "RENDER_CONFIG", {})
    monkeypatch.setattr(config_loader, "COLOR_ENABLED", True)
    monkeypatch.setattr(config_loader, "NEUTRAL_RGB", (192, 192, 192))
    monkeypatch.setattr(config_loader, "RED_COLOR", "red")
    monkeypatch.setattr(config_loader, "GREEN_COLOR", "green")

    config_loader.set_color_enabled(False)
    config_loader.set_neutral_rgb([5, 6, 7])
    config_loader.set_highlight_colors(green="cyan")

    assert config_loader.COLOR_ENABLED is False
    assert config_loader.NEUTRAL_RGB == (5, 6, 7)
    assert config_loader.RED_COLOR == "red"
    assert config_loader.GREEN_COLOR == "cyan"
    assert config_loader.RENDER_CONFIG["highlight"] == {"red": "red", "green": "cyan"}


def test_print_render_config(capsys):
    config_loader.print_render_config()
    out = capsys.readouterr().out
    assert "Render configuration:" in out
    assert "color_enabled" in out
