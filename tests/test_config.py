import json
from pathlib import Path

import pytest

from hmmtag.config import HMMTaggerConfig, get_config_dir, get_config_file, load_config, read_config
from hmmtag.errors import ConfigurationError


def test_defaults():
    config = HMMTaggerConfig()

    assert config.unseen_observation_score == -100.0
    assert config.start_tag == "#"
    assert config.quit_command == "QUIT"
    assert config.num_partitions == 5
    assert config.random_partition is False


@pytest.mark.parametrize("score", [0.0, 5.0, float("nan"), float("-inf")])
def test_unseen_score_must_be_finite_negative(score):
    with pytest.raises(ConfigurationError):
        HMMTaggerConfig(unseen_observation_score=score)


def test_partitions_validated():
    with pytest.raises(ConfigurationError):
        HMMTaggerConfig(num_partitions=1)


def test_config_dir_from_environment(isolated_config_dir):
    assert get_config_dir() == isolated_config_dir
    assert get_config_file() == isolated_config_dir / "config.json"


def test_config_dir_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("HMMTAG_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert get_config_dir() == tmp_path / "hmmtag"


def test_missing_config_file_reads_empty(tmp_path):
    assert read_config(tmp_path / "missing.json") == {}


def test_layering(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"unseen_observation_score": -50, "num_partitions": 4, "quit_command": "exit"}))

    from_file = load_config(config_file=config_file, environ={})
    assert from_file.unseen_observation_score == -50.0
    assert from_file.num_partitions == 4
    assert from_file.quit_command == "exit"

    from_env = load_config(config_file=config_file, environ={"HMMTAG_UNSEEN_SCORE": "-20", "HMMTAG_PARTITIONS": "3"})
    assert from_env.unseen_observation_score == -20.0
    assert from_env.num_partitions == 3

    from_overrides = load_config(
        {"unseen_observation_score": -10.0, "num_partitions": None},
        config_file=config_file,
        environ={"HMMTAG_UNSEEN_SCORE": "-20"},
    )
    assert from_overrides.unseen_observation_score == -10.0
    assert from_overrides.num_partitions == 4


def test_default_config_file_location(isolated_config_dir):
    isolated_config_dir.mkdir(parents=True)
    (isolated_config_dir / "config.json").write_text(json.dumps({"seed": 11, "unknown_key": 1}))

    config = load_config(environ={})
    assert config.seed == 11


def test_invalid_values(tmp_path):
    missing = tmp_path / "missing.json"
    with pytest.raises(ConfigurationError):
        load_config(config_file=missing, environ={"HMMTAG_UNSEEN_SCORE": "low"})
    with pytest.raises(ConfigurationError):
        load_config({"unseen_observation_score": 1.0}, config_file=missing, environ={})
    with pytest.raises(ConfigurationError):
        load_config({"no_such_option": 1}, config_file=missing, environ={})


def test_malformed_config_file(tmp_path):
    bad = tmp_path / "config.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_config(config_file=bad, environ={})

    not_object = tmp_path / "list.json"
    not_object.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        read_config(Path(not_object))


@pytest.mark.parametrize("values", [
    {"random_partition": "false"},
    {"debug": 1},
    {"quit_command": 5},
    {"quit_command": ""},
    {"start_tag": ["#"]},
    {"seed": "7"},
    {"seed": True},
    {"num_partitions": True},
    {"unseen_observation_score": True},
])
def test_config_file_values_are_type_checked(tmp_path, values):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(values))

    with pytest.raises(ConfigurationError):
        load_config(config_file=config_file, environ={})


def test_well_typed_config_file_values(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "random_partition": True, "debug": False, "quit_command": "exit", "start_tag": "<s>", "seed": 3,
    }))

    config = load_config(config_file=config_file, environ={})
    assert config.random_partition is True
    assert config.quit_command == "exit"
    assert config.start_tag == "<s>"
    assert config.seed == 3
