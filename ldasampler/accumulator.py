import numpy as np

from .errors import StateConsistencyError
from .formatted_logger import formatted_logger
from .utils import get_top_words, write_top_words

logger = formatted_logger('SampleAccumulator')


class LDAResult(object):
    """ Model parameters estimated by Gibbs sampling

    Until the accumulator is finalized both tables hold the sum of the
    per-sample estimates; afterwards they hold the average.

    Attributes
    ----------
    topic_term_probabilities: ndarray, shape (n_topic, n_voca)
        P(term | topic), often called phi
    document_topic_probabilities: ndarray, shape (n_doc, n_topic)
        P(topic | document), often called theta
    sample_count: int
        number of sweeps that contributed to the estimate
    """

    def __init__(self, n_topic, n_doc, n_voca):
        self.topic_term_probabilities = np.zeros([n_topic, n_voca])
        self.document_topic_probabilities = np.zeros([n_doc, n_topic])
        self.sample_count = 0

    @property
    def n_topic(self):
        return self.topic_term_probabilities.shape[0]

    @property
    def n_doc(self):
        return self.document_topic_probabilities.shape[0]

    @property
    def n_voca(self):
        return self.topic_term_probabilities.shape[1]

    def top_words(self, vocab, topic, n_words=20):
        return get_top_words(self.topic_term_probabilities, vocab, topic, n_words)

    def write_top_words(self, vocab, filepath, n_words=20):
        write_top_words(self.topic_term_probabilities, vocab, filepath, n_words)


class SampleAccumulator(object):
    """ Averages the parameter estimates of the sweeps taken after burn-in

    Sweep `iteration` (0-based) is a sample when iteration >= burn_in and
    (iteration - burn_in) is a multiple of iterations_per_sample.
    """

    def __init__(self, n_topic, n_doc, n_voca, alpha, beta, burn_in, iterations_per_sample):
        self.alpha = alpha
        self.beta = beta
        self.burn_in = burn_in
        self.iterations_per_sample = iterations_per_sample
        self.result = LDAResult(n_topic, n_doc, n_voca)
        self.finalized = False

    @property
    def sample_count(self):
        return self.result.sample_count

    def is_sample_iteration(self, iteration):
        return iteration >= self.burn_in and (iteration - self.burn_in) % self.iterations_per_sample == 0

    def maybe_sample(self, iteration, state):
        """ Add the current estimate if `iteration` is on the sampling schedule

        Returns
        -------
        sampled: bool
        """
        if not self.is_sample_iteration(iteration):
            return False
        self.sample(state)
        logger.debug('[SAMPLE] iteration %d,\tsample_count:%d', iteration, self.sample_count)
        return True

    def sample(self, state):
        """ Add the estimate of phi and theta under the current assignment to the running sums """
        if self.finalized:
            raise StateConsistencyError('cannot add a sample after the result has been finalized')
        n_topic = self.result.n_topic
        self.result.topic_term_probabilities += \
            (state.TW + self.beta) / (state.sum_T + state.n_voca * self.beta)[:, np.newaxis]
        self.result.document_topic_probabilities += \
            (state.DT + self.alpha) / (state.sum_D + n_topic * self.alpha)[:, np.newaxis]
        self.result.sample_count += 1

    def finalize(self, state):
        """ Turn the running sums into averages

        If no sweep was on the schedule a single sample of the current state
        is taken, so a result is always available.

        Returns
        -------
        result: LDAResult
        """
        if self.finalized:
            return self.result
        if self.result.sample_count <= 0:
            self.sample(state)
        elif self.result.sample_count > 1:
            self.result.topic_term_probabilities /= self.result.sample_count
            self.result.document_topic_probabilities /= self.result.sample_count
        self.finalized = True
        logger.debug('[FINALIZE] averaged %d samples', self.result.sample_count)
        return self.result
