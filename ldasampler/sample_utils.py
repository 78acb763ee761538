import numpy as np


def sampling_from_cumulative(c_sum, random_state):
    """ Sample index from cumulative unnormalised proportions

    Returns the smallest index whose cumulative value exceeds a uniform draw
    in [0, c_sum[-1]).

    Parameters
    ----------
    c_sum: ndarray
        non-decreasing cumulative sum of unnormalised probabilities
    random_state: numpy.random.Generator
        source of the uniform draw

    Returns
    -------
    index: int
    """
    thr = c_sum[-1] * random_state.random()
    return int(np.searchsorted(c_sum, thr, side='right'))


def sample_topic(state, di, word, alpha, beta, random_state, c_sum, work=None):
    """ Draw a topic for one occurrence of `word` in document `di`

    p(k | di, word) is proportional to
    (TW[k, word] + beta) * (DT[di, k] + alpha) / (sum_T[k] + n_voca * beta).
    The counts of `state` must already exclude the occurrence being resampled.

    Parameters
    ----------
    state: CountState
    di: int
        document index
    word: int
        term index
    alpha: float
    beta: float
    random_state: numpy.random.Generator
    c_sum: ndarray, shape (n_topic)
        scratch buffer, overwritten with the cumulative topic proportions
    work: ndarray, shape (n_topic)
        second scratch buffer, allocated when omitted

    Returns
    -------
    new_topic: int
    """
    np.add(state.TW[:, word], beta, out=c_sum)
    if work is None:
        work = np.empty_like(c_sum)
    np.add(state.DT[di], alpha, out=work)
    c_sum *= work
    np.add(state.sum_T, state.n_voca * beta, out=work)
    c_sum /= work
    np.cumsum(c_sum, out=c_sum)
    return sampling_from_cumulative(c_sum, random_state)
