import math

import pytest

from hmmtag.errors import ConfigurationError, LengthMismatchError
from hmmtag.model import count_corpus, to_log_probs, train_model, train_model_from_inputs


def _as_dict(table):
    return {row: dict(values) for row, values in table.items()}


def test_counts_for_single_sentence():
    transitions, emissions = count_corpus(["noun verb"], ["dog runs"])

    assert transitions.to_dict() == {"#": {"noun": 1}, "noun": {"verb": 1}}
    assert transitions.total("#") == 1
    assert transitions.total("noun") == 1
    assert emissions.to_dict() == {"noun": {"dog": 1}, "verb": {"runs": 1}}
    assert emissions.total("noun") == 1
    assert emissions.total("verb") == 1
    assert "#" not in emissions


def test_counts_are_normalized(train_corpus):
    tags, sentences = train_corpus
    _, emissions = count_corpus(tags, sentences)

    assert emissions.count("det", "the") == 4
    assert "The" not in emissions["det"]
    assert emissions.count("n", "dog") == 3


def test_token_lists_match_raw_lines():
    from_lines = count_corpus(["Noun Verb"], ["Dog  Runs\n"])
    from_tokens = count_corpus([["noun", "verb"]], [[" dog", "RUNS "]])

    assert from_lines[0].to_dict() == from_tokens[0].to_dict()
    assert from_lines[1].to_dict() == from_tokens[1].to_dict()


def test_log_probs_rows_sum_to_one(model):
    for table in (model.transitions, model.emissions):
        for row in table.values():
            assert sum(math.exp(value) for value in row.values()) == pytest.approx(1.0, abs=1e-9)


def test_log_prob_values(model):
    # "#" row: pro x2, det x2, n x1
    assert model.transitions["#"]["pro"] == pytest.approx(math.log(2 / 5))
    assert model.transitions["#"]["n"] == pytest.approx(math.log(1 / 5))
    assert model.emissions["det"]["the"] == pytest.approx(0.0)


def test_to_log_probs_is_idempotent(train_corpus):
    tags, sentences = train_corpus
    transitions, emissions = count_corpus(tags, sentences)

    assert _as_dict(to_log_probs(transitions)) == _as_dict(to_log_probs(transitions))
    assert _as_dict(to_log_probs(emissions)) == _as_dict(to_log_probs(emissions))


def test_log_prob_tables_are_read_only(tiny_model):
    with pytest.raises(TypeError):
        tiny_model.transitions["#"]["noun"] = 0.0
    with pytest.raises(TypeError):
        tiny_model.emissions["adj"] = {}


def test_model_metadata(model, train_corpus):
    tags, _ = train_corpus
    assert model.num_sentences == len(tags)
    assert model.num_tokens == sum(len(line.split()) for line in tags)
    assert model.tags[:2] == ["pro", "v"]


def test_sentence_length_mismatch_fails_fast():
    with pytest.raises(LengthMismatchError) as excinfo:
        train_model(["noun verb", "noun verb"], ["dog runs", "dog runs fast"])

    assert excinfo.value.index == 1
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 3


def test_corpus_size_mismatch_is_configuration_error():
    with pytest.raises(ConfigurationError):
        train_model(["noun verb", "noun"], ["dog runs"])


@pytest.mark.parametrize("inputs", [[], [["noun"]], [["noun"], ["dog"], ["extra"]]])
def test_training_inputs_must_be_a_pair(inputs):
    with pytest.raises(ConfigurationError):
        train_model_from_inputs(inputs)


def test_training_inputs_pair(tiny_model):
    model = train_model_from_inputs([["noun verb"], ["dog runs"]])

    assert _as_dict(model.transitions) == _as_dict(tiny_model.transitions)
    assert _as_dict(model.emissions) == _as_dict(tiny_model.emissions)


def test_empty_training_data():
    model = train_model([], [])

    assert len(model.transitions) == 0
    assert len(model.emissions) == 0


def test_models_are_hashable(tiny_model):
    other = train_model(["noun verb"], ["dog runs"])
    registry = {tiny_model: "first", other: "second"}

    assert hash(tiny_model) == hash(tiny_model)
    assert registry[tiny_model] == "first"
    assert registry[other] == "second"
