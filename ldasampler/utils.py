import numpy as np


def get_top_words(topic_word_matrix, vocab, topic, n_words=20):
    """ words of `topic` ordered by decreasing probability

    Parameters
    ----------
    topic_word_matrix: ndarray, shape (n_topic, n_voca)
    vocab: sequence of str, size=n_voca
    topic: int
    n_words: int
        number of words to return
    """
    if not isinstance(vocab, np.ndarray):
        vocab = np.array(vocab)
    top_words = vocab[topic_word_matrix[topic].argsort(kind='stable')[::-1][:n_words]]
    return top_words


def write_top_words(topic_word_matrix, vocab, filepath, n_words=20, delimiter=',', newline='\n'):
    """ write one line per topic: the topic index followed by its top words """
    if not isinstance(vocab, np.ndarray):
        vocab = np.array(vocab)
    with open(filepath, 'w') as f:
        for ti in range(topic_word_matrix.shape[0]):
            top_words = get_top_words(topic_word_matrix, vocab, ti, n_words)
            f.write('%d' % (ti))
            for word in top_words:
                f.write(delimiter + word)
            f.write(newline)

