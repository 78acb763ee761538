import time

import numpy as np
from scipy.special import gammaln

from .accumulator import SampleAccumulator
from .base import BaseGibbsParamTopicModel, check_non_negative_int, check_positive_int
from .corpus import Corpus
from .count_state import CountState
from .errors import InvalidInputError, StateConsistencyError
from .formatted_logger import formatted_logger
from .sample_utils import sample_topic

logger = formatted_logger('GibbsLDA')

DEFAULT_TOPIC_COUNT = 10
DEFAULT_ALPHA = 5.0
DEFAULT_BETA = 0.5
DEFAULT_MAX_ITERATIONS = 10000
DEFAULT_BURN_IN_ITERATIONS = 2000
DEFAULT_ITERATIONS_PER_SAMPLE = 100


class GibbsLDA(BaseGibbsParamTopicModel):
    """
    Latent dirichlet allocation,
    Blei, David M and Ng, Andrew Y and Jordan, Michael I, 2003

    Latent Dirichlet allocation with collapsed Gibbs sampling on vectors of
    term counts, following
    Heinrich, Gregor, Parameter estimation for text analysis, 2009

    After `burn_in` sweeps, every `iterations_per_sample`-th sweep contributes
    an estimate of the topic-term and document-topic probabilities; the
    estimates are averaged when the fit is finalized.

    The sampler is driven through three call points, `initialize`, `step`
    and `finalize`. `fit` runs them in a plain loop bounded by `max_iter`.

    Attributes
    ----------
    max_iter: int
        maximum number of Gibbs sampling sweeps run by `fit`
    burn_in: int
        number of sweeps run before the first sample
    iterations_per_sample: int
        number of sweeps between two samples after burn-in
    random_state: numpy.random.Generator
        source of every random draw of the sampler
    state: CountState
        sufficient statistics of the current fit
    iteration: int
        0-based index of the last completed sweep, -1 before the first sweep
    result: LDAResult
        averaged parameters, available once `finalize` has been called
    """

    def __init__(self, n_topic=DEFAULT_TOPIC_COUNT, alpha=DEFAULT_ALPHA, beta=DEFAULT_BETA,
                 max_iter=DEFAULT_MAX_ITERATIONS, burn_in=DEFAULT_BURN_IN_ITERATIONS,
                 iterations_per_sample=DEFAULT_ITERATIONS_PER_SAMPLE, random_state=None, **kwargs):
        super(GibbsLDA, self).__init__(n_topic=n_topic, alpha=alpha, beta=beta, **kwargs)
        self.max_iter = check_non_negative_int('max_iter', max_iter)
        self.burn_in = burn_in
        self.iterations_per_sample = iterations_per_sample
        self.random_state = np.random.default_rng(random_state)

        self.state = None
        self.accumulator = None
        self.iteration = -1
        self.result = None

    @property
    def burn_in(self):
        return self._burn_in

    @burn_in.setter
    def burn_in(self, value):
        self._check_not_fitting('burn_in')
        self._burn_in = check_non_negative_int('burn_in', value)

    @property
    def iterations_per_sample(self):
        return self._iterations_per_sample

    @iterations_per_sample.setter
    def iterations_per_sample(self, value):
        self._check_not_fitting('iterations_per_sample')
        self._iterations_per_sample = check_positive_int('iterations_per_sample', value)

    @property
    def topic_assignment(self):
        return None if self.state is None else self.state.topic_assignment

    @property
    def sample_count(self):
        return 0 if self.accumulator is None else self.accumulator.sample_count

    def initialize(self, docs, n_voca=None):
        """ Randomly assign a topic to every word token of the corpus

        Parameters
        ----------
        docs: Corpus, scipy.sparse matrix, 2-d ndarray, list of count vectors or list of dict
            one row or item of non-negative integer term counts per document
        n_voca: int
            vocabulary size, only used when `docs` has no fixed width
        """
        corpus = Corpus.from_any(docs, n_voca)
        if corpus.n_doc == 0:
            raise InvalidInputError('cannot fit a topic model to an empty corpus')

        self.state = CountState.initialize(corpus, self.n_topic, self.random_state)
        self.n_doc = corpus.n_doc
        self.n_voca = corpus.n_voca
        self.accumulator = SampleAccumulator(self.n_topic, self.n_doc, self.n_voca, self.alpha, self.beta,
                                             self.burn_in, self.iterations_per_sample)
        self.iteration = -1
        self.result = None
        self.fitting = True

        if self.verbose:
            logger.info('[INIT] n_doc:%d,\tn_voca:%d,\tn_token:%d', self.n_doc, self.n_voca,
                        self.state.n_occurrence)

    def sweep(self):
        """ Resample the topic of every word token once

        Returns
        -------
        iteration: int
            0-based index of the sweep just completed
        """
        if self.state is None:
            raise StateConsistencyError('initialize must be called before sampling')
        if not self.fitting:
            raise StateConsistencyError('the fit has already been finalized')

        state = self.state
        rng = self.random_state
        alpha = self.alpha
        beta = self.beta
        c_sum = np.empty(self.n_topic)
        work = np.empty(self.n_topic)
        doc_of = state.doc_of.tolist()
        word_of = state.word_of.tolist()

        for oi in range(state.n_occurrence):
            di = doc_of[oi]
            word = word_of[oi]
            state.remove(di, word, oi)
            new_topic = sample_topic(state, di, word, alpha, beta, rng, c_sum, work)
            state.add(di, word, oi, new_topic)

        self.iteration += 1
        return self.iteration

    def step(self):
        """ One sweep, followed by a sample of the parameters when the sweep is on schedule """
        prev = time.time()
        iteration = self.sweep()
        self.accumulator.maybe_sample(iteration, self.state)

        if self.verbose:
            logger.info('[ITER] %d,\telapsed time:%.2f,\tlog_likelihood:%.2f', iteration, time.time() - prev,
                        self.log_likelihood())
        return iteration

    def finalize(self):
        """ Average the samples taken so far into the final parameters

        Returns
        -------
        result: LDAResult
        """
        if self.state is None:
            raise StateConsistencyError('initialize must be called before finalize')
        self.result = self.accumulator.finalize(self.state)
        self.fitting = False
        return self.result

    def fit(self, docs, max_iter=None, callback=None, n_voca=None):
        """ Gibbs sampling for LDA

        Parameters
        ----------
        docs
            corpus of term count vectors, see `initialize`
        max_iter: int
            maximum number of Gibbs sampling sweeps, defaults to `self.max_iter`
        callback: callable
            called as callback(model, iteration) after each sweep; returning False stops sampling
        n_voca: int
            vocabulary size, only used when `docs` has no fixed width

        Returns
        -------
        result: LDAResult
        """
        if max_iter is None:
            max_iter = self.max_iter
        max_iter = check_non_negative_int('max_iter', max_iter)

        self.initialize(docs, n_voca)
        try:
            for _ in range(max_iter):
                iteration = self.step()
                if callback is not None and callback(self, iteration) is False:
                    break
            return self.finalize()
        finally:
            self.fitting = False

    def log_likelihood(self):
        """
        joint log likelihood of the words and the current topic assignment
        """
        if self.state is None:
            raise StateConsistencyError('initialize must be called before computing the likelihood')
        state = self.state
        ll = self.n_doc * gammaln(self.alpha * self.n_topic)
        ll -= self.n_doc * self.n_topic * gammaln(self.alpha)

        ll += gammaln(state.DT + self.alpha).sum() - gammaln(state.sum_D + self.alpha * self.n_topic).sum()
        # a zero-width corpus has no topic-word factor
        if self.n_voca > 0:
            ll += self.n_topic * gammaln(self.beta * self.n_voca)
            ll -= self.n_topic * self.n_voca * gammaln(self.beta)
            ll += gammaln(state.TW + self.beta).sum() - gammaln(state.sum_T + self.beta * self.n_voca).sum()

        return ll
