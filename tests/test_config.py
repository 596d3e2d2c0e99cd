import pytest

from countdown_gif.config import RenderConfig, load_config
from countdown_gif.errors import ConfigError


def test_defaults():
    cfg = load_config()
    assert cfg == RenderConfig()
    assert cfg.size == (580, 150)
    assert cfg.frame_count == 30
    assert cfg.expired_foreground == (210, 210, 210)


def test_yaml_overrides_defaults(tmp_path):
    path = tmp_path / "countdown.yaml"
    path.write_text("frame_count: 10\nforeground: [10, 20, 30]\noutput: out.gif\n")

    cfg = load_config(path)
    assert cfg.frame_count == 10
    assert cfg.foreground == (10, 20, 30)
    assert cfg.output == "out.gif"
    assert cfg.width == 580


def test_empty_yaml_means_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == RenderConfig()


@pytest.mark.parametrize(
    "text",
    [
        "colour: [1, 2, 3]\n",
        "foreground: [1, 2]\n",
        "background: [0, 0, 300]\n",
        "frame_count: 0\n",
        "- just\n- a list\n",
        "width: [unclosed\n",
    ],
)
def test_bad_config_is_rejected(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "nope.yaml")


def test_overrides_skip_none():
    cfg = RenderConfig().with_overrides(output="x.gif", frame_count=None, font_path=None)
    assert cfg.output == "x.gif"
    assert cfg.frame_count == 30
    assert cfg.font_path is None
