# -*- coding: utf-8 -*-
'''
Medical dictionary loading and the merge-join dictionary filter.

Created on Tue Oct 13 09:12:44 2026

@author: csvwwrw
'''

from bisect import bisect_left
from pathlib import Path
from config.config import Config
from config.logging_config import get_module_logger
from oncobase.text_view import TextView

_logger = get_module_logger(__name__)


def _is_excluded(word):
    '''Entries holding an uppercase letter or a digit are not dictionary words.'''
    return any(ch.isupper() or ch.isdigit() for ch in word)


class MedicalDictionary:
    '''
    Sorted, read-only set of lowercase medical words.

    Built once per run from a word list with one word per line.
    '''

    def __init__(self, words=()):
        '''
        Args:
            words (Iterable[str]): Candidate words. Blank entries and entries
                with uppercase characters or digits are dropped, the rest is
                de-duplicated and sorted.
        '''
        kept = set()
        for word in words:
            word = str(word)
            if word and not _is_excluded(word):
                kept.add(word)
        self._words = tuple(sorted(kept))

    @classmethod
    def from_text(cls, text):
        '''
        Parse a raw word list.

        Args:
            text (str): One word per line; surrounding non-printable
                characters (e.g. '\\r') are stripped.

        Returns:
            MedicalDictionary: Parsed dictionary.
        '''
        lines = TextView.of(text).split('\n')
        return cls(str(line.strip()) for line in lines)

    @classmethod
    def load(cls, path=None, encoding=Config.ARTICLE_ENCODING):
        '''
        Load the dictionary from a word list file.

        A missing or unreadable file degrades to an empty dictionary, so the
        filter keeps nothing instead of aborting the run.

        Args:
            path (str | Path, optional): Word list. Defaults to
                Config.DICTIONARY_PATH.
            encoding (str): File encoding. Defaults to utf-8.

        Returns:
            MedicalDictionary: Loaded (possibly empty) dictionary.
        '''
        path = Path(path or Config.DICTIONARY_PATH)
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            _logger.warning(f'Medical dictionary unavailable ({path}): {e}')
            return cls()

        dictionary = cls.from_text(text)
        if not dictionary:
            _logger.warning(f'Medical dictionary {path} is empty, no word will pass the filter')
        else:
            _logger.info(f'Loaded {len(dictionary)} dictionary words from {path}')
        return dictionary

    @property
    def words(self):
        return self._words

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __getitem__(self, index):
        return self._words[index]

    def __contains__(self, word):
        i = bisect_left(self._words, word)
        return i < len(self._words) and self._words[i] == word

    def __repr__(self):
        return f'MedicalDictionary({len(self._words)} words)'


def filter_against_dictionary(distribution, dictionary, min_count=Config.MIN_WORD_COUNT):
    '''
    Keep the words of a distribution that are frequent and in the dictionary.

    Single merge-join pass: the distribution is walked in ascending word
    order while a cursor into the sorted dictionary skips smaller words.
    The pass stops as soon as the dictionary is exhausted.

    Args:
        distribution (Iterable[Tuple[str, int]]): Article distribution, any
            order.
        dictionary (MedicalDictionary | Sequence[str]): Words sorted
            ascending.
        min_count (int): Words must occur strictly more than min_count
            times. Defaults to 3.

    Returns:
        WordDistribution: Surviving (word, count) pairs, ascending by word.
    '''
    words = dictionary.words if isinstance(dictionary, MedicalDictionary) else dictionary
    size = len(words)
    kept = []
    i = 0
    if not size:
        return kept

    for word, count in sorted(distribution):
        if count <= min_count:
            continue
        while i < size and words[i] < word:
            i += 1
        if i == size:
            break
        if words[i] == word:
            kept.append((word, count))

    return kept
