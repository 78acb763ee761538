import numpy as np

from .errors import InvalidInputError, StateConsistencyError


class CountState(object):
    """ Sufficient statistics of a collapsed Gibbs sampler for LDA

    Every term occurrence of the corpus gets one slot in `topic_assignment`,
    in document order, then term order, then repetition order. The four count
    tables are always consistent with `topic_assignment` outside of a
    `remove` / `add` pair.

    Attributes
    ----------
    n_doc: int
        the number of documents in the corpus
    n_voca: int
        the vocabulary size of the corpus
    n_topic: int
        the number of topics
    DT: ndarray, shape (n_doc, n_topic)
        document-topic matrix, number of word tokens of each document assigned to each topic
    sum_D: ndarray, shape (n_doc)
        number of word tokens of each document
    TW: ndarray, shape (n_topic, n_voca)
        topic-word matrix, number of word tokens of each word assigned to each topic
    sum_T: ndarray, shape (n_topic)
        number of word tokens assigned to each topic
    topic_assignment: ndarray, shape (n_occurrence)
        current topic of each word token
    doc_of: ndarray, shape (n_occurrence)
        document index of each word token
    word_of: ndarray, shape (n_occurrence)
        word index of each word token
    """

    def __init__(self, n_doc, n_voca, n_topic):
        self.n_doc = n_doc
        self.n_voca = n_voca
        self.n_topic = n_topic

        self.DT = np.zeros([self.n_doc, self.n_topic], dtype=np.int64)
        self.sum_D = np.zeros(self.n_doc, dtype=np.int64)
        self.TW = np.zeros([self.n_topic, self.n_voca], dtype=np.int64)
        self.sum_T = np.zeros(self.n_topic, dtype=np.int64)

        self.topic_assignment = np.zeros(0, dtype=np.int64)
        self.doc_of = np.zeros(0, dtype=np.int64)
        self.word_of = np.zeros(0, dtype=np.int64)

    @property
    def n_occurrence(self):
        return len(self.topic_assignment)

    @classmethod
    def initialize(cls, corpus, n_topic, random_state):
        """ Allocate the count tables and assign every word token a uniformly random topic

        Parameters
        ----------
        corpus: Corpus
        n_topic: int
        random_state: numpy.random.Generator

        Returns
        -------
        state: CountState
        """
        if n_topic <= 0:
            raise InvalidInputError('n_topic must be positive, got %r' % (n_topic,))
        if corpus.n_doc == 0:
            raise InvalidInputError('cannot fit a topic model to an empty corpus')

        state = cls(corpus.n_doc, corpus.n_voca, n_topic)
        state.doc_of, state.word_of = corpus.occurrences()
        state.topic_assignment = np.zeros(len(state.doc_of), dtype=np.int64)

        for oi in range(len(state.doc_of)):
            topic = int(random_state.integers(n_topic))
            state.topic_assignment[oi] = topic
            di = state.doc_of[oi]
            word = state.word_of[oi]
            state.DT[di, topic] += 1
            state.sum_D[di] += 1
            state.TW[topic, word] += 1
            state.sum_T[topic] += 1
        return state

    def _check_index(self, oi):
        if not 0 <= oi < len(self.topic_assignment):
            raise StateConsistencyError('occurrence index %d out of range [0, %d)' % (oi, len(self.topic_assignment)))

    def remove(self, di, word, oi):
        """ Take word token `oi` out of the statistics and return its old topic """
        self._check_index(oi)
        old_topic = self.topic_assignment[oi]
        if (self.DT[di, old_topic] <= 0 or self.sum_D[di] <= 0
                or self.TW[old_topic, word] <= 0 or self.sum_T[old_topic] <= 0):
            raise StateConsistencyError('removing token %d (doc %d, word %d, topic %d) makes a count negative'
                                        % (oi, di, word, old_topic))
        self.DT[di, old_topic] -= 1
        self.sum_D[di] -= 1
        self.TW[old_topic, word] -= 1
        self.sum_T[old_topic] -= 1
        return old_topic

    def add(self, di, word, oi, new_topic):
        """ Put word token `oi` back into the statistics under `new_topic` """
        self._check_index(oi)
        if not 0 <= new_topic < self.n_topic:
            raise StateConsistencyError('topic %d out of range [0, %d)' % (new_topic, self.n_topic))
        self.topic_assignment[oi] = new_topic
        self.DT[di, new_topic] += 1
        self.sum_D[di] += 1
        self.TW[new_topic, word] += 1
        self.sum_T[new_topic] += 1

    def check_consistency(self):
        """ Recompute every count table from `topic_assignment` and compare

        Raises
        ------
        StateConsistencyError
            if any table is negative or disagrees with the topic assignment
        """
        for name in ('DT', 'sum_D', 'TW', 'sum_T'):
            if np.any(getattr(self, name) < 0):
                raise StateConsistencyError('%s has a negative count' % name)

        DT = np.zeros_like(self.DT)
        TW = np.zeros_like(self.TW)
        np.add.at(DT, (self.doc_of, self.topic_assignment), 1)
        np.add.at(TW, (self.topic_assignment, self.word_of), 1)

        if not np.array_equal(DT, self.DT):
            raise StateConsistencyError('DT disagrees with topic assignment')
        if not np.array_equal(TW, self.TW):
            raise StateConsistencyError('TW disagrees with topic assignment')
        if not np.array_equal(DT.sum(1), self.sum_D):
            raise StateConsistencyError('sum_D disagrees with topic assignment')
        if not np.array_equal(TW.sum(1), self.sum_T):
            raise StateConsistencyError('sum_T disagrees with topic assignment')
