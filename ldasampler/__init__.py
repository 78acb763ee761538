from .lda_gibbs import GibbsLDA
from .accumulator import LDAResult, SampleAccumulator
from .corpus import Corpus
from .count_state import CountState
from .errors import LDAError, InvalidInputError, StateConsistencyError
