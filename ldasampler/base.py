import numbers

from .errors import InvalidInputError


def check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not value > 0:
        raise InvalidInputError('%s must be positive, got %r' % (name, value))
    return value


def check_positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidInputError('%s must be a positive integer, got %r' % (name, value))
    return int(value)


def check_non_negative_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise InvalidInputError('%s must be a non-negative integer, got %r' % (name, value))
    return int(value)


class BaseTopicModel(object):
    """
    Attributes
    ----------
    n_doc: int
        the number of total documents in the corpus, known once the corpus is given
    n_voca: int
        the vocabulary size of the corpus, known once the corpus is given
    verbose: boolean
        if True, log each iteration step while inference.
    """
    def __init__(self, **kwargs):
        self.n_doc = None
        self.n_voca = None
        self.verbose = kwargs.pop('verbose', True)
        if kwargs:
            raise InvalidInputError('unexpected keyword arguments: %s' % ', '.join(sorted(kwargs)))


class BaseGibbsParamTopicModel(BaseTopicModel):
    """ Base class of parametric topic models with Gibbs sampling inference

    Attributes
    ----------
    n_topic: int
        a number of topics to be inferred through the Gibbs sampling
    alpha: float
        symmetric parameter of Dirichlet prior for document-topic distribution
    beta: float
        symmetric parameter of Dirichlet prior for topic-word distribution
    """

    def __init__(self, n_topic, alpha, beta, **kwargs):
        super(BaseGibbsParamTopicModel, self).__init__(**kwargs)
        self.fitting = False
        self.n_topic = n_topic
        self.alpha = alpha
        self.beta = beta

    @property
    def n_topic(self):
        return self._n_topic

    @n_topic.setter
    def n_topic(self, value):
        self._check_not_fitting('n_topic')
        self._n_topic = check_positive_int('n_topic', value)

    @property
    def alpha(self):
        return self._alpha

    @alpha.setter
    def alpha(self, value):
        self._check_not_fitting('alpha')
        self._alpha = float(check_positive('alpha', value))

    @property
    def beta(self):
        return self._beta

    @beta.setter
    def beta(self, value):
        self._check_not_fitting('beta')
        self._beta = float(check_positive('beta', value))

    def _check_not_fitting(self, name):
        if getattr(self, 'fitting', False):
            raise InvalidInputError('%s cannot be changed while a fit is in progress' % name)
