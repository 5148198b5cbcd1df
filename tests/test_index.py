"""End-to-end corpus TF-IDF tests."""

from __future__ import annotations

import logging
import math

import pytest

from natural_content import get_tf_idfs
from natural_content.config import load_config
from natural_content.errors import EmptyDocumentError, LanguageNotSupportedError
from natural_content.stopwords import get_stopwords


def test_two_document_scenario():
    result = get_tf_idfs(["word1 word1 word2", "word2 word2 word3"], 1, True)

    first, second = result.documents
    assert result.number_of_docs == 2
    assert first.count == {"word1": 2, "word2": 1}
    assert first.max_count == 2
    assert first.tfs == {"word1": 1.0, "word2": 0.5}
    assert second.count == {"word2": 2, "word3": 1}
    assert second.tfs == {"word2": 1.0, "word3": 0.5}

    assert first.tf_idf["word1"] == pytest.approx(math.log(2) + 1)
    assert first.tf_idf["word2"] == pytest.approx(0.5)
    assert second.tf_idf["word2"] == pytest.approx(1.0)

    word2 = result.stats["word2"]
    assert result.stats["word1"].nbr_docs == 1
    assert word2.nbr_docs == 2
    assert word2.tfs == [0.5, 1.0]
    assert word2.tf_min == 0.5
    assert word2.tf_max == 1.0
    assert word2.tf_avg == pytest.approx(0.75)
    assert word2.idf_max == 1.0
    assert word2.idf_avg == pytest.approx(1.0)
    assert word2.tf_idfs == [pytest.approx(0.5), pytest.approx(1.0)]
    assert word2.tf_idf_avg == pytest.approx(0.75)


def test_term_statistics_are_consistent(documents):
    result = get_tf_idfs(documents)

    assert result.number_of_docs == 3
    assert set(result.stats) == {term for document in result.documents for term in document.tfs}
    for term, stat in result.stats.items():
        containing = sum(1 for document in result.documents if term in document.tfs)
        assert 1 <= stat.nbr_docs <= result.number_of_docs
        assert stat.nbr_docs == containing
        assert len(stat.tfs) == len(stat.idfs) == len(stat.tf_idfs) == stat.nbr_docs
        assert stat.tf_avg == pytest.approx(stat.tf_sum / stat.nbr_docs)
        assert stat.idf_avg == pytest.approx(stat.idf_sum / stat.nbr_docs)
        assert stat.tf_idf_avg == pytest.approx(stat.tf_idf_sum / stat.nbr_docs)
        assert stat.tf_min <= stat.tf_avg <= stat.tf_max


def test_terms_in_every_document_keep_unit_idf(documents):
    result = get_tf_idfs(documents)

    for term in ("word2", "word7"):
        assert result.stats[term].idfs == [1.0, 1.0, 1.0]
        for document in result.documents:
            assert document.tf_idf[term] == pytest.approx(document.tfs[term])


def test_documents_keep_input_order(documents):
    result = get_tf_idfs(documents)

    assert result.documents[2].count == {"word7": 1, "word2": 1}
    assert result.stats["word7"].tfs == [
        result.documents[0].tfs["word7"],
        result.documents[1].tfs["word7"],
        1.0,
    ]


def test_french_bigrams_without_stop_words(documents_fr):
    result = get_tf_idfs(documents_fr, 2, False, "fr")

    stopwords = get_stopwords("fr")
    assert result.stats["conditions utilisations"].nbr_docs == 2
    for term in result.stats:
        assert len(term.split()) == 2
        assert not any(token in stopwords for token in term.split())


def test_runs_do_not_share_state(documents):
    first = get_tf_idfs(documents)
    second = get_tf_idfs(documents)

    assert first.stats["word2"] is not second.stats["word2"]
    assert first.stats["word2"].nbr_docs == second.stats["word2"].nbr_docs == 3


def test_empty_corpus():
    result = get_tf_idfs([])

    assert result.number_of_docs == 0
    assert result.documents == []
    assert result.stats == {}


def test_empty_document_is_kept_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="natural_content"):
        result = get_tf_idfs(["alpha beta", "<p>...</p>", "beta"])

    assert result.number_of_docs == 3
    assert result.documents[1].is_empty
    assert result.documents[1].tf_idf == {}
    assert result.stats["beta"].idfs == [pytest.approx(math.log(1.5) + 1)] * 2
    assert "Document 1 has no terms" in caplog.text


def test_empty_document_raises_when_configured(config_file):
    config_path = config_file("empty_documents: raise\n")

    with pytest.raises(EmptyDocumentError) as excinfo:
        get_tf_idfs(["alpha", "   "], config=load_config(config_path))

    assert excinfo.value.index == 1


def test_configuration_supplies_defaults(stats_config, documents_fr):
    stats_config.raw.update({"ngram_size": 2, "with_stop_words": False, "language": "fr"})

    result = get_tf_idfs(documents_fr, config=stats_config)

    assert "conditions utilisations" in result.stats


def test_explicit_arguments_override_configuration(stats_config):
    stats_config.raw.update({"ngram_size": 2, "with_stop_words": False, "language": "xx"})

    result = get_tf_idfs(["word1 word1 word2"], 1, True, config=stats_config)

    assert set(result.stats) == {"word1", "word2"}


def test_unsmoothed_configuration(stats_config):
    stats_config.raw["smooth_idf"] = False

    result = get_tf_idfs(["shared rare", "shared"], config=stats_config)

    assert result.stats["shared"].idf_max == 0.0
    assert result.documents[0].tf_idf["rare"] == pytest.approx(math.log(2))


def test_unknown_language_fails_before_any_statistics(documents):
    with pytest.raises(LanguageNotSupportedError):
        get_tf_idfs(documents, 1, False, "klingon")


def test_terms_after_stray_angle_bracket_are_counted():
    result = get_tf_idfs(["a<b c d", "c d"])

    assert result.documents[0].count == {"a<b": 1, "c": 1, "d": 1}
    assert result.stats["c"].nbr_docs == 2
    assert result.stats["d"].nbr_docs == 2
    assert result.stats["a<b"].nbr_docs == 1
