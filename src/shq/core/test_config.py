import pytest

from shq.core.config import ShqConfig, find_config_file
from shq.exceptions import ConfigError

CONFIG = """
style: always
vars:
  files: ["a b", c]
  dest: /tmp
  retries: 3
templates:
  copy: "cp -r {*files} {dest}"
"""


def test_load_missing_returns_defaults(tmp_path):
    config = ShqConfig.load(tmp_path / "shq.yaml")
    assert config.style == "minimal"
    assert config.vars == {}
    assert config.templates == {}


def test_load_config(tmp_path):
    path = tmp_path / "shq.yaml"
    path.write_text(CONFIG)
    config = ShqConfig.load(path)
    assert config.style == "always"
    assert config.get_vars() == {"files": ["a b", "c"], "dest": "/tmp", "retries": 3}
    assert config.get_template("copy") == "cp -r {*files} {dest}"
    assert config.get_template("missing") is None


def test_empty_file_is_defaults(tmp_path):
    path = tmp_path / "shq.yaml"
    path.write_text("")
    assert ShqConfig.load(path) == ShqConfig()


@pytest.mark.parametrize(
    "text",
    [
        "style: fancy\n",
        "unknown: 1\n",
        "- just\n- a list\n",
        "vars: [1, 2]\n",
        "style: [unclosed\n",
        "vars:\n  flag: true\n",
        "vars:\n  xs: [a, false]\n",
        "vars:\n  ratio: .nan\n",
        "vars:\n  limit: .inf\n",
    ],
)
def test_invalid_config(tmp_path, text):
    path = tmp_path / "shq.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError) as exc_info:
        ShqConfig.load(path)
    assert exc_info.value.path == path


def test_find_config_file_in_parent(tmp_path):
    (tmp_path / "shq.yaml").write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == tmp_path / "shq.yaml"


def test_find_config_file_missing(tmp_path, monkeypatch):
    nested = tmp_path / "x"
    nested.mkdir()
    monkeypatch.setattr("pathlib.Path.exists", lambda self: False)
    assert find_config_file(nested) is None


def test_numeric_vars_keep_their_type(tmp_path):
    path = tmp_path / "shq.yaml"
    path.write_text("vars:\n  n: 3\n  ratio: 0.5\n  name: 'true'\n")
    assert ShqConfig.load(path).get_vars() == {"n": 3, "ratio": 0.5, "name": "true"}
