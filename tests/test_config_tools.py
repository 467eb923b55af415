import argparse

import pytest

from common import config_tools
from mazes import SolverConfig
from mazes.render import GlyphConfig


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    return str(path)


def test_read_config_object(tmp_path):
    path = write(tmp_path, "cfg.yml", "!obj:mazes/SolverConfig\nsteps: true\nglyphs: !obj:mazes.render/GlyphConfig\n  path: '*'\n")
    config = config_tools.read_config(path)
    assert isinstance(config, SolverConfig)
    assert config.steps is True
    assert config.display is False
    assert config.glyphs == GlyphConfig(path='*')


def test_merge_config_files(tmp_path):
    first = write(tmp_path, "a.yml", "!obj:mazes/SolverConfig\nsteps: true\nglyphs: !obj:mazes.render/GlyphConfig\n  wall: 'X'\n")
    second = write(tmp_path, "b.yml", "!obj:mazes/SolverConfig\npath: true\nglyphs: !obj:mazes.render/GlyphConfig\n  path: '*'\n")
    config = config_tools.read_config(first, second)
    assert config.steps and config.path
    assert config.glyphs == GlyphConfig(wall='X', path='*')


def test_include(tmp_path):
    write(tmp_path, "glyphs.yml", "!obj:mazes.render/GlyphConfig\nopen: '_'\n")
    path = write(tmp_path, "cfg.yml", "!obj:mazes/SolverConfig\nglyphs: !inc ~/glyphs.yml\n")
    config = config_tools.read_config(path)
    assert config.glyphs.open == '_'


def test_unknown_field(tmp_path):
    path = write(tmp_path, "cfg.yml", "!obj:mazes/SolverConfig\ncolour: red\n")
    with pytest.raises(config_tools.ConfigError, match="colour"):
        config_tools.read_config(path)


def test_update_object():
    config = SolverConfig()
    config_tools.update_object(config, {"glyphs.wall": "X", "steps": True})
    assert config.glyphs.wall == "X"
    assert config.steps is True
    with pytest.raises(config_tools.ConfigError):
        config_tools.update_object(config, {"glyphs.colour": "red"})


def test_update_object_reads_strings_for_other_field_types():
    config = SolverConfig(steps=True)
    config_tools.update_object(config, {"steps": "false", "display": "yes", "glyphs.open": "0"})
    assert config.steps is False
    assert config.display is True
    assert config.glyphs.open == "0"
    with pytest.raises(config_tools.ConfigError):
        config_tools.update_object(config, {"path": "maybe"})
    options = config_tools.update_object({}, {"summary": "out.yml"})
    assert options == {"summary": "out.yml"}


def test_parse_overrides():
    assert config_tools.parse_overrides(["glyphs.open= ", "steps:=True", "path:=false", "a:=[1, 2]"]) == {
        "glyphs.open": " ",
        "steps": True,
        "path": False,
        "a": [1, 2],
    }
    with pytest.raises(config_tools.ConfigError):
        config_tools.parse_overrides(["steps"])
    with pytest.raises(config_tools.ConfigError):
        config_tools.parse_overrides(["a:=[1, 2"])


def test_get_config_from_namespace(tmp_path):
    parser = argparse.ArgumentParser()
    config_tools.add_config_arguments(parser)
    args = parser.parse_args(["-ovr", "display:=True"])
    config = config_tools.get_config_from_namespace(args, SolverConfig())
    assert config.display is True

    path = write(tmp_path, "cfg.yml", "summary: out.yml\n")
    args = parser.parse_args(["-cfg", path])
    assert config_tools.get_config_from_namespace(args) == {"summary": "out.yml"}


def test_solver_config_from_plain_mapping():
    config = SolverConfig.from_object({"steps": True, "glyphs": {"wall": "X"}})
    assert config.steps is True
    assert config.glyphs == GlyphConfig(wall="X")
    assert SolverConfig.from_object({}) == SolverConfig()


def test_solver_config_rejects_unknown_fields():
    with pytest.raises(config_tools.ConfigError, match="colour"):
        SolverConfig.from_object({"colour": "red"})
    with pytest.raises(config_tools.ConfigError, match="GlyphConfig"):
        SolverConfig.from_object({"glyphs": {"door": "D"}})
    with pytest.raises(config_tools.ConfigError):
        SolverConfig.from_object({"glyphs": "abc"})
    with pytest.raises(config_tools.ConfigError):
        SolverConfig.from_object(["steps"])
