# -*- coding: utf-8 -*-
'''
Word frequency distributions.

A distribution is a list of (word, count) tuples with lowercased, unique
words. Its order depends on the stage: alphabetical for dictionary merging,
count-descending for reporting.

Created on Mon Oct 12 15:31:26 2026

@author: csvwwrw
'''

from collections import Counter
from typing import List, Tuple
from oncobase.tokenizer import iter_tokens

WordDistribution = List[Tuple[str, int]]


def count_words(text):
    '''
    Count normalized words of a text buffer.

    Args:
        text (str | TextView): Article text.

    Returns:
        Counter: word -> occurrences.
    '''
    counts = Counter()
    for word in iter_tokens(text):
        counts[str(word).lower()] += 1
    return counts


def compute_distribution(text) -> WordDistribution:
    '''
    Compute the ranked word distribution of a text buffer.

    Tokens are split on whitespace/control characters, trimmed of
    punctuation and lowercased before counting.

    Args:
        text (str | TextView): Article text.

    Returns:
        WordDistribution: (word, count) pairs, count descending, ties in
            ascending alphabetical order. Empty for an empty buffer.
    '''
    return sort_by_count(count_words(text).items(), reverse=True)


def sort_by_word(distribution, reverse=False) -> WordDistribution:
    '''Sort pairs alphabetically by word (then by count).'''
    return sorted(distribution, reverse=reverse)


def sort_by_count(distribution, reverse=False) -> WordDistribution:
    '''
    Sort pairs by count, ties alphabetical by word in both directions.

    Args:
        distribution (Iterable[Tuple[str, int]]): Pairs to sort.
        reverse (bool): Count descending instead of ascending.

    Returns:
        WordDistribution: New sorted list.
    '''
    if reverse:
        return sorted(distribution, key=lambda pair: (-pair[1], pair[0]))
    return sorted(distribution, key=lambda pair: (pair[1], pair[0]))


def contains_word(distribution, word):
    '''True if any pair of distribution holds word, whatever its count.'''
    return any(w == word for w, _ in distribution)
