# -*- coding: utf-8 -*-
'''
Co-occurrence aggregation of cancer terms across qualifying articles.

Created on Tue Oct 13 11:40:08 2026

@author: csvwwrw
'''

import numpy as np
import pandas as pd
from config.config import Config
from oncobase.distribution import sort_by_count


class CooccurrenceAggregator:
    '''
    Running aggregate over the filtered distributions of a corpus.

    Only fold() mutates the state, one article at a time, and nothing is
    ever reset mid-run.

    Attributes:
        vocabulary (tuple): Matrix axes, in report order.
        anchor (str): Term an article must contain to qualify.
        total (int): Articles folded so far.
        qualifying (int): Articles that contained the anchor.
    '''

    def __init__(self, vocabulary=None, anchor=None):
        '''
        Args:
            vocabulary (Sequence[str], optional): Matrix terms. Defaults to
                Config.VOCABULARY.
            anchor (str, optional): Qualification term. Defaults to
                Config.ANCHOR_TERM.

        Raises:
            ValueError: If the vocabulary holds duplicate terms.
        '''
        self.vocabulary = tuple(vocabulary if vocabulary is not None else Config.VOCABULARY)
        self.anchor = anchor or Config.ANCHOR_TERM

        if len(set(self.vocabulary)) != len(self.vocabulary):
            raise ValueError('Vocabulary terms must be unique')

        self._index = {term: i for i, term in enumerate(self.vocabulary)}
        self._matrix = np.zeros((len(self.vocabulary), len(self.vocabulary)), dtype=np.int64)
        self._totals = {}
        self.total = 0
        self.qualifying = 0

    def fold(self, filtered):
        '''
        Fold one article's filtered distribution into the aggregate.

        The article always counts toward the total. When the anchor term is
        among its words, every (word, count) is added to the cumulative
        totals and each pair of vocabulary terms present in the article
        gets +1 in the matrix (presence, not token counts).

        Args:
            filtered (Iterable[Tuple[str, int]]): Dictionary-filtered
                distribution of the article.

        Returns:
            bool: True if the article qualified.
        '''
        self.total += 1

        filtered = list(filtered)
        present = {word for word, _ in filtered}
        if self.anchor not in present:
            return False

        for word, count in filtered:
            self._totals[word] = self._totals.get(word, 0) + count

        hits = [self._index[term] for term in self.vocabulary if term in present]
        if hits:
            self._matrix[np.ix_(hits, hits)] += 1

        self.qualifying += 1
        return True

    # readouts

    @property
    def totals(self):
        '''Copy of the cumulative word -> count mapping.'''
        return dict(self._totals)

    def word_totals(self):
        '''Cumulative (word, count) pairs sorted ascending by count, ties by word.'''
        return sort_by_count(self._totals.items())

    def cooccurrence(self, term_a, term_b):
        '''
        Number of qualifying articles holding both terms.

        Raises:
            KeyError: If a term is not part of the vocabulary.
        '''
        return int(self._matrix[self._index[term_a], self._index[term_b]])

    @property
    def matrix(self):
        return self._matrix.copy()

    def cooccurrence_frame(self):
        '''Co-occurrence matrix as a DataFrame labeled by vocabulary terms.'''
        return pd.DataFrame(self._matrix.copy(), index=list(self.vocabulary), columns=list(self.vocabulary))

    def totals_series(self):
        '''Cumulative word totals as a Series, ascending by count.'''
        pairs = self.word_totals()
        return pd.Series([count for _, count in pairs], index=[word for word, _ in pairs], dtype='int64', name='count')

    def triples(self):
        '''Yield (term_a, term_b, count) over the vocabulary in nested order.'''
        for i, term_a in enumerate(self.vocabulary):
            for j, term_b in enumerate(self.vocabulary):
                yield term_a, term_b, int(self._matrix[i, j])
