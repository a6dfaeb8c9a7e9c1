# -*- coding: utf-8 -*-
'''
Word tokenization over text views.

Character classes (Unicode-aware, identical to the C locale on ASCII):
    - boundary: whitespace (str.isspace) or control characters (category Cc)
    - punctuation: categories P* and S*, i.e. everything C ispunct() accepts
      on ASCII plus Unicode quotes, dashes and symbols

A raw token is a maximal run of non-boundary characters; the word is the raw
token with punctuation trimmed from both ends.

Created on Mon Oct 12 14:05:52 2026

@author: csvwwrw
'''

import re
import unicodedata
from oncobase.text_view import TextView

# \s matches exactly the characters str.isspace() accepts, the ranges are Cc
_RAW_TOKEN_RX = re.compile(r'[^\s\x00-\x1f\x7f-\x9f]+')


def is_boundary(ch):
    return ch.isspace() or unicodedata.category(ch) == 'Cc'


def is_punct(ch):
    return unicodedata.category(ch)[0] in 'PS'


def iter_raw_tokens(text):
    '''
    Yield every maximal run of non-boundary characters as a view.

    Args:
        text (str | TextView): Buffer to scan.

    Yields:
        TextView: Raw token views over the original buffer.
    '''
    view = TextView.of(text)
    buffer = view.buffer
    for match in _RAW_TOKEN_RX.finditer(buffer, view.first, view.last):
        yield TextView(buffer, match.start(), match.end())


def iter_tokens(text):
    '''
    Yield raw tokens trimmed of leading/trailing punctuation.

    Tokens made only of punctuation (e.g. "--") are dropped.

    Args:
        text (str | TextView): Buffer to scan.

    Yields:
        TextView: Non-empty word views, case untouched.
    '''
    for raw in iter_raw_tokens(text):
        word = raw.strip(is_punct)
        if word:
            yield word


def tokenize(text):
    '''List of normalized (lowercased) words in text, in reading order.'''
    return [str(word).lower() for word in iter_tokens(text)]
