import pytest

from hmmtag.model import train_model

TRAIN_TAGS = [
    "pro v det n .",
    "det n v .",
    "det adj n v det n .",
    "pro v adj .",
    "n v .",
]
TRAIN_SENTENCES = [
    "I saw the dog .",
    "The dog barked .",
    "The big dog chased the cat .",
    "You look tired .",
    "Dogs bark .",
]


@pytest.fixture
def train_corpus():
    return list(TRAIN_TAGS), list(TRAIN_SENTENCES)


@pytest.fixture
def model(train_corpus):
    tags, sentences = train_corpus
    return train_model(tags, sentences)


@pytest.fixture
def tiny_model():
    return train_model(["noun verb"], ["dog runs"])


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    config_dir = tmp_path / "hmmtag-config"
    monkeypatch.setenv("HMMTAG_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("HMMTAG_UNSEEN_SCORE", raising=False)
    monkeypatch.delenv("HMMTAG_PARTITIONS", raising=False)
    return config_dir
