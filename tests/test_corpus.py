"""
Unit tests for building the count view of a corpus.
"""

import numpy as np
import pytest
import scipy.sparse as sp

from ldasampler.corpus import Corpus
from ldasampler.errors import InvalidInputError


class TestCorpusConstruction:
    """Every supported input yields the same sparse counts."""

    def test_dense_matrix(self, small_counts):
        corpus = Corpus.from_any(small_counts)

        assert corpus.n_doc == 2
        assert corpus.n_voca == 3
        np.testing.assert_array_equal(corpus.doc_ids[0], [0, 2])
        np.testing.assert_array_equal(corpus.doc_cnt[0], [2, 1])
        np.testing.assert_array_equal(corpus.doc_ids[1], [1, 2])
        np.testing.assert_array_equal(corpus.doc_cnt[1], [3, 1])

    def test_sparse_matrix_matches_dense(self, small_counts):
        dense = Corpus.from_any(small_counts)
        sparse = Corpus.from_any(sp.csr_matrix(small_counts))

        assert sparse.n_voca == dense.n_voca
        for di in range(dense.n_doc):
            np.testing.assert_array_equal(sparse.doc_ids[di], dense.doc_ids[di])
            np.testing.assert_array_equal(sparse.doc_cnt[di], dense.doc_cnt[di])

    def test_list_of_dicts(self):
        corpus = Corpus.from_any([{2: 1, 0: 2}, {1: 3, 2: 1}], n_voca=5)

        assert corpus.n_voca == 5
        np.testing.assert_array_equal(corpus.doc_ids[0], [0, 2])
        np.testing.assert_array_equal(corpus.doc_cnt[0], [2, 1])

    def test_list_of_dicts_infers_vocabulary(self):
        corpus = Corpus.from_any([{0: 1}, {4: 2}])
        assert corpus.n_voca == 5

    def test_list_of_dense_vectors(self):
        corpus = Corpus.from_any([[2, 0, 1], [0, 3, 1]])
        assert corpus.n_doc == 2
        assert corpus.n_voca == 3
        assert corpus.n_occurrence == 7

    def test_list_of_sparse_rows(self, small_counts):
        rows = [sp.csr_matrix(row) for row in small_counts]
        corpus = Corpus.from_any(rows)
        np.testing.assert_array_equal(corpus.doc_lengths(), [3, 4])

    def test_ids_cnt_merges_repeated_ids(self):
        corpus = Corpus.from_ids_cnt([[3, 1, 3]], [[1, 2, 4]])
        np.testing.assert_array_equal(corpus.doc_ids[0], [1, 3])
        np.testing.assert_array_equal(corpus.doc_cnt[0], [2, 5])

    def test_corpus_passes_through(self, small_counts):
        corpus = Corpus.from_any(small_counts)
        assert Corpus.from_any(corpus) is corpus

    def test_empty_list(self):
        corpus = Corpus.from_any([])
        assert corpus.n_doc == 0
        assert len(corpus) == 0


class TestCorpusValidation:
    """Counts that are not non-negative integers are rejected."""

    def test_negative_count(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any([[1, -1, 0]])

    def test_fractional_count(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any(np.array([[1.5, 0.0]]))

    def test_integral_floats_are_accepted(self):
        corpus = Corpus.from_any(np.array([[2.0, 0.0, 1.0]]))
        np.testing.assert_array_equal(corpus.doc_cnt[0], [2, 1])

    def test_term_id_out_of_range(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_ids_cnt([[0, 7]], [[1, 1]], n_voca=5)

    def test_negative_term_id(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_ids_cnt([[-1]], [[1]])

    def test_mismatched_ids_and_counts(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_ids_cnt([[0, 1]], [[1]])

    def test_ragged_dense_vectors(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any([[1, 0], [1, 0, 2]])

    def test_one_dimensional_array(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any(np.array([2, 0, 1]))

    def test_three_dimensional_array(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any(np.zeros((2, 2, 2)))

    def test_list_of_scalars(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any([2, 0, 1])

    def test_mixed_dicts_and_vectors(self):
        with pytest.raises(InvalidInputError):
            Corpus.from_any([{0: 1}, [1, 0]])


class TestOccurrences:
    """Occurrences are flattened in document, term, repetition order."""

    def test_order(self, small_counts):
        doc_of, word_of = Corpus.from_any(small_counts).occurrences()

        np.testing.assert_array_equal(doc_of, [0, 0, 0, 1, 1, 1, 1])
        np.testing.assert_array_equal(word_of, [0, 0, 2, 1, 1, 1, 2])

    def test_empty_documents_contribute_nothing(self):
        doc_of, word_of = Corpus.from_any([[0, 0], [1, 0], [0, 0]]).occurrences()

        np.testing.assert_array_equal(doc_of, [1])
        np.testing.assert_array_equal(word_of, [0])
