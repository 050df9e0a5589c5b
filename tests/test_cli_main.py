from __future__ import annotations

import pytest

import main as cli_main

from .helpers import background_image_mods, write_json


def test_main_raises_when_input_is_missing(tmp_path):
    missing = tmp_path / "missing.json"

    with pytest.raises(FileNotFoundError, match="Theme mods JSON not found"):
        cli_main.main([str(missing)])


def test_main_rejects_malformed_theme_mods(tmp_path):
    input_path = tmp_path / "mods.json"
    input_path.write_text('{"background-color": [1, 2]}', encoding="utf-8")

    with pytest.raises(ValueError, match="must be a scalar value"):
        cli_main.main([str(input_path)])


def test_main_prints_css_to_stdout(tmp_path, capsys):
    input_path = tmp_path / "mods.json"
    write_json(input_path, {"background-color": "000000"})

    cli_main.main([str(input_path)])

    out = capsys.readouterr().out
    assert out.startswith("body{background-color:#000000;}")
    assert "font-family" not in out


def test_main_writes_output_with_font_rules(tmp_path, capsys):
    input_path = tmp_path / "mods.json"
    output_path = tmp_path / "theme.css"
    write_json(input_path, background_image_mods())

    cli_main.main([str(input_path), "-o", str(output_path), "--fonts"])

    css = output_path.read_text(encoding="utf-8")
    assert css.startswith("body{background:#336699 url(https://example.com/img/bg.png)")
    assert css.endswith(".font-header,h1,h2,h3,h4,h5,h6{font-family:Open Sans;}")
    assert f"Rendered: {output_path}" in capsys.readouterr().out


def test_main_prints_font_request_and_body_classes(tmp_path, capsys):
    input_path = tmp_path / "mods.json"
    write_json(input_path, {"font-body": "Lato", "header-layout": "header-layout-2"})

    cli_main.main([str(input_path), "--font-request", "--body-class", "home", "--body-class", "blog"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[-2] == "//fonts.googleapis.com/css?family=Open+Sans|Lato"
    assert lines[-1] == "home blog footer-layout-1 header-layout-2"


def test_main_resolves_relative_paths_against_root(monkeypatch, tmp_path):
    write_json(tmp_path / "input.json", {})
    (tmp_path / "out").mkdir()
    monkeypatch.setattr(cli_main, "ROOT", tmp_path)

    cli_main.main(["input.json", "-o", "out/theme.css"])

    assert (tmp_path / "out" / "theme.css").read_text(encoding="utf-8").startswith(
        "body{background-color:#ffffff;}"
    )
