"""
Numeric count view of a vectorized corpus.

Each document is kept as a pair of parallel arrays: the sorted ids of the
terms it contains and how many times each of them occurs. The sampler walks
occurrences in document order, then term order, then repetition order, and
`Corpus.occurrences` flattens the corpus in exactly that order.
"""
from collections.abc import Mapping

import numpy as np
import scipy.sparse as sp

from .errors import InvalidInputError


def _as_counts(values, di):
    cnt = np.asarray(values, dtype=float)
    if np.any(cnt < 0):
        raise InvalidInputError('document %d has a negative term count' % di)
    if np.any(np.mod(cnt, 1) != 0):
        raise InvalidInputError('document %d has a non-integral term count' % di)
    return cnt.astype(np.int64)


class Corpus(object):
    """ Sparse integer term counts of an ordered set of documents

    Attributes
    ----------
    doc_ids: list of ndarray
        ascending term ids with non-zero count, one array per document
    doc_cnt: list of ndarray
        occurrence count of each term in `doc_ids`
    n_voca: int
        dimensionality of the document vectors
    """

    def __init__(self, doc_ids, doc_cnt, n_voca):
        self.doc_ids = doc_ids
        self.doc_cnt = doc_cnt
        self.n_voca = n_voca

    @property
    def n_doc(self):
        return len(self.doc_ids)

    @property
    def n_occurrence(self):
        return int(sum(cnt.sum() for cnt in self.doc_cnt))

    def __len__(self):
        return self.n_doc

    def doc_lengths(self):
        """ total number of term occurrences of each document """
        return np.array([cnt.sum() for cnt in self.doc_cnt], dtype=np.int64)

    def occurrences(self):
        """ Flatten the corpus into one entry per term occurrence

        Returns
        -------
        doc_of: ndarray, shape (n_occurrence)
            document index of each occurrence
        word_of: ndarray, shape (n_occurrence)
            term index of each occurrence
        """
        doc_of = np.repeat(np.arange(self.n_doc, dtype=np.int64), self.doc_lengths())
        if self.n_doc == 0:
            return doc_of, np.zeros(0, dtype=np.int64)
        word_of = np.concatenate([np.repeat(ids, cnt) for ids, cnt in zip(self.doc_ids, self.doc_cnt)])
        return doc_of, word_of.astype(np.int64)

    @classmethod
    def from_ids_cnt(cls, doc_ids, doc_cnt, n_voca=None):
        """ Build a corpus from parallel lists of term ids and term counts

        Parameters
        ----------
        doc_ids: list
            list of term ids for each document
        doc_cnt: list
            list of term counts for each document
        n_voca: int
            vocabulary size, inferred as max term id + 1 when omitted
        """
        if len(doc_ids) != len(doc_cnt):
            raise InvalidInputError('doc_ids and doc_cnt have different lengths: %d != %d'
                                    % (len(doc_ids), len(doc_cnt)))
        _ids = list()
        _cnt = list()
        for di in range(len(doc_ids)):
            ids = np.asarray(doc_ids[di], dtype=np.int64).reshape(-1)
            cnt = _as_counts(doc_cnt[di], di).reshape(-1)
            if len(ids) != len(cnt):
                raise InvalidInputError('document %d has %d term ids but %d counts' % (di, len(ids), len(cnt)))
            # merge repeated ids and order terms ascending
            ids, inverse = np.unique(ids, return_inverse=True)
            cnt = np.bincount(inverse.reshape(-1), weights=cnt, minlength=len(ids)).astype(np.int64)
            nonzero = cnt > 0
            _ids.append(ids[nonzero])
            _cnt.append(cnt[nonzero])

        max_id = max([ids.max() for ids in _ids if len(ids) > 0] or [-1])
        if np.any([ids.min() < 0 for ids in _ids if len(ids) > 0]):
            raise InvalidInputError('term ids must be non-negative')
        if n_voca is None:
            n_voca = int(max_id) + 1
        elif max_id >= n_voca:
            raise InvalidInputError('term id %d is out of range for n_voca=%d' % (max_id, n_voca))
        return cls(_ids, _cnt, int(n_voca))

    @classmethod
    def from_matrix(cls, matrix):
        """ Build a corpus from a document-term matrix, dense or scipy.sparse """
        if sp.issparse(matrix):
            matrix = sp.csr_matrix(matrix)
            matrix.sum_duplicates()
            matrix.sort_indices()
            n_doc, n_voca = matrix.shape
            doc_ids = [matrix.indices[matrix.indptr[di]:matrix.indptr[di + 1]] for di in range(n_doc)]
            doc_cnt = [matrix.data[matrix.indptr[di]:matrix.indptr[di + 1]] for di in range(n_doc)]
        else:
            matrix = np.asarray(matrix)
            if matrix.ndim != 2:
                raise InvalidInputError('document-term matrix must be 2-dimensional, got %d' % matrix.ndim)
            n_voca = matrix.shape[1]
            doc_ids = [np.flatnonzero(row) for row in matrix]
            doc_cnt = [row[ids] for row, ids in zip(matrix, doc_ids)]
        return cls.from_ids_cnt(doc_ids, doc_cnt, n_voca)

    @classmethod
    def from_any(cls, docs, n_voca=None):
        """ Build a corpus from any supported document collection

        Parameters
        ----------
        docs: Corpus, scipy.sparse matrix, 2-d ndarray, list of 1-d count vectors or list of dict
            rows or items are documents; a dict maps term id to occurrence count
        n_voca: int
            vocabulary size for inputs without a fixed width
        """
        if isinstance(docs, Corpus):
            return docs
        if sp.issparse(docs) or (isinstance(docs, np.ndarray) and docs.ndim == 2):
            return cls.from_matrix(docs)
        if isinstance(docs, np.ndarray):
            raise InvalidInputError('document-term array must be 2-dimensional, got %d' % docs.ndim)
        docs = list(docs)
        if len(docs) > 0 and all(isinstance(doc, Mapping) for doc in docs):
            doc_ids = [list(doc.keys()) for doc in docs]
            doc_cnt = [list(doc.values()) for doc in docs]
            return cls.from_ids_cnt(doc_ids, doc_cnt, n_voca)
        if len(docs) > 0 and all(sp.issparse(doc) for doc in docs):
            return cls.from_matrix(sp.vstack(docs))
        if len(docs) > 0:
            if any(np.ndim(doc) != 1 for doc in docs):
                raise InvalidInputError('each document must be a 1-d count vector, a dict or a sparse row')
            widths = set(np.asarray(doc).reshape(-1).shape[0] for doc in docs)
            if len(widths) != 1:
                raise InvalidInputError('dense document vectors have different lengths: %s' % sorted(widths))
            return cls.from_matrix(np.vstack([np.asarray(doc).reshape(-1) for doc in docs]))
        return cls(list(), list(), 0 if n_voca is None else int(n_voca))
