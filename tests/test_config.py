from pathlib import Path

import numpy as np
import pytest

from glyphterm.config import Builder, TerminalConfig, load_config, min_window_size, window_pixel_size
from glyphterm.errors import ConfigError
from glyphterm.font import FontData


def test_defaults():
    config = TerminalConfig()
    assert config.title == "glyphterm"
    assert config.inner_size == (800, 600)
    assert config.font_path is None
    assert config.vsync is True


def test_builder_chain():
    font = FontData(8, 8, np.zeros((128, 128, 4), np.uint8))
    config = (
        Builder()
        .with_inner_size(100, 100)
        .with_title("Hello!")
        .with_font(font)
        .with_vsync(False)
        .build()
    )
    assert config.inner_size == (100, 100)
    assert config.title == "Hello!"
    assert config.font is font
    assert config.vsync is False


def test_builder_rejects_bad_size():
    with pytest.raises(ConfigError):
        Builder().with_inner_size(0, 10).build()


def test_builder_from_base_keeps_values():
    base = TerminalConfig(title="base", inner_size=(320, 200))
    config = Builder(base).with_font_path(Path("font.png")).build()
    assert config.title == "base"
    assert config.inner_size == (320, 200)
    assert config.font_path == Path("font.png")


def test_window_pixel_size_aligns_and_enforces_minimum():
    assert window_pixel_size((800, 600), (8, 16)) == (800, 592)
    assert window_pixel_size((100, 100), (8, 16)) == (160, 320)
    assert window_pixel_size((805, 1000), (10, 10)) == (800, 1000)


def test_load_config(tmp_path):
    path = tmp_path / "term.toml"
    path.write_text(
        '[terminal]\ntitle = "From TOML"\ninner_size = [640, 480]\nfont_path = "fonts/a.png"\nlog_level = "debug"\n',
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.title == "From TOML"
    assert config.inner_size == (640, 480)
    assert config.font_path == tmp_path / "fonts" / "a.png"
    assert config.log_level == "DEBUG"


def test_load_config_without_table_gives_defaults(tmp_path):
    path = tmp_path / "empty.toml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == TerminalConfig()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_load_config_invalid_toml(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[terminal\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_invalid_value(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('[terminal]\ninner_size = "big"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_unknown_log_level_is_a_config_error(tmp_path):
    with pytest.raises(ConfigError):
        Builder().with_log_level("verbose").build()
    assert Builder().with_log_level("warning").build().log_level == "WARNING"

    path = tmp_path / "glyphterm.toml"
    path.write_text('[terminal]\nlog_level = "chatty"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_min_window_size_is_twenty_cells():
    assert min_window_size((8, 16)) == (160, 320)
    assert window_pixel_size((1, 1), (12, 12)) == min_window_size((12, 12))
