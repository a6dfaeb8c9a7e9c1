# -*- coding: utf-8 -*-
'''
Zero-copy views over text buffers.

A TextView references a half-open range [first, last) of an existing str and
never slices it while scanning: searches go through str.find/rfind with
start/end bounds and trimming only moves offsets. Call str(view) to
materialize the referenced characters.

The view keeps a reference to its buffer, it never owns or copies it.

Created on Mon Oct 12 11:47:03 2026

@author: csvwwrw
'''

from functools import total_ordering


def is_graph(ch):
    '''Printable, non-space character (C isgraph extended to Unicode).'''
    return ch.isprintable() and not ch.isspace()


def _strip_predicate(chars):
    '''
    Build the "strip this character" predicate for the strip family.

    Args:
        chars (None | str | callable): None strips non-graphic characters,
            a string strips any of its characters, a callable strips the
            characters it returns True for.

    Returns:
        callable: Predicate over single characters.
    '''
    if chars is None:
        return lambda ch: not is_graph(ch)
    if isinstance(chars, str):
        return frozenset(chars).__contains__
    if callable(chars):
        return chars
    raise TypeError(f'strip argument must be None, str or callable, not {type(chars).__name__}')


@total_ordering
class TextView:
    '''
    Immutable view over the range [first, last) of a text buffer.

    Equality and ordering compare the referenced characters, never the
    identity of the buffer; a view also compares equal to a str holding the
    same characters and hashes like it.
    '''

    __slots__ = ('_buffer', '_first', '_last')

    def __init__(self, buffer='', first=0, last=None):
        '''
        Args:
            buffer (str): Text to view.
            first (int): Start offset into buffer. Defaults to 0.
            last (int, optional): End offset (exclusive). Defaults to the
                end of buffer.

        Raises:
            TypeError: If buffer is not a str.
            ValueError: If the offsets are not 0 <= first <= last <= len(buffer).
        '''
        if not isinstance(buffer, str):
            raise TypeError(f'TextView buffer must be str, not {type(buffer).__name__}')
        if last is None:
            last = len(buffer)
        if not 0 <= first <= last <= len(buffer):
            raise ValueError(
                f'Invalid view range [{first}, {last}) over a buffer of length {len(buffer)}'
                )
        self._buffer = buffer
        self._first = first
        self._last = last

    @classmethod
    def of(cls, text):
        '''Return text unchanged if it is already a view, else a view over all of it.'''
        if isinstance(text, TextView):
            return text
        return cls(text)

    @property
    def buffer(self):
        return self._buffer

    @property
    def first(self):
        return self._first

    @property
    def last(self):
        return self._last

    # capacity and iteration

    def __len__(self):
        return self._last - self._first

    def __bool__(self):
        return self._last > self._first

    def __iter__(self):
        buffer = self._buffer
        for i in range(self._first, self._last):
            yield buffer[i]

    def __reversed__(self):
        buffer = self._buffer
        for i in range(self._last - 1, self._first - 1, -1):
            yield buffer[i]

    # element access

    def at(self, pos):
        '''
        Character at pos, with bounds checking.

        Raises:
            IndexError: If pos is not within [0, len(view)).
        '''
        if not 0 <= pos < self._last - self._first:
            raise IndexError(f'TextView index {pos} out of range for length {len(self)}')
        return self._buffer[self._first + pos]

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, stop, step = key.indices(len(self))
            if step != 1:
                raise ValueError('TextView slices do not support a step')
            stop = max(start, stop)
            return TextView(self._buffer, self._first + start, self._first + stop)
        if key < 0:
            key += len(self)
        return self.at(key)

    def front(self):
        return self.at(0)

    def back(self):
        return self.at(len(self) - 1)

    # conversion

    def __str__(self):
        return self._buffer[self._first:self._last]

    def to_string(self):
        return str(self)

    def __repr__(self):
        return f'TextView({str(self)!r}, first={self._first}, last={self._last})'

    # searching

    def find(self, needle):
        '''Offset of the first occurrence of needle relative to the view, or -1.'''
        pos = self._buffer.find(needle, self._first, self._last)
        return pos - self._first if pos >= 0 else -1

    def rfind(self, needle):
        '''Offset of the last occurrence of needle relative to the view, or -1.'''
        pos = self._buffer.rfind(needle, self._first, self._last)
        return pos - self._first if pos >= 0 else -1

    def __contains__(self, needle):
        return self._buffer.find(needle, self._first, self._last) >= 0

    def startswith(self, prefix):
        return self._buffer.startswith(prefix, self._first, self._last)

    def endswith(self, suffix):
        return self._buffer.endswith(suffix, self._first, self._last)

    # partitioning

    def split(self, delimiters=''):
        '''
        Split the view into maximal runs of kept characters.

        Args:
            delimiters (str): Characters separating the runs. When empty,
                runs are made of graphic characters (printable, non-space).

        Returns:
            ViewRuns: Lazy, restartable iterable of non-empty sub-views.
        '''
        if delimiters:
            excluded = frozenset(delimiters)
            return ViewRuns(self, lambda ch: ch not in excluded)
        return ViewRuns(self, is_graph)

    def partition(self, needle):
        '''
        Divide the view around the first occurrence of needle.

        Returns:
            tuple: (before, match, after) sub-views. When needle is absent
                the result is (whole, empty, empty) with both empty views
                placed at the end of the view.
        '''
        pos = self._buffer.find(needle, self._first, self._last)
        if pos < 0:
            left = right = self._last
        else:
            left, right = pos, pos + len(needle)
        return self._divide(left, right)

    def rpartition(self, needle):
        '''
        Divide the view around the last occurrence of needle.

        Returns:
            tuple: (before, match, after) sub-views. When needle is absent
                the result is (empty, empty, whole) with both empty views
                placed at the start of the view.
        '''
        pos = self._buffer.rfind(needle, self._first, self._last)
        if pos < 0:
            left = right = self._first
        else:
            left, right = pos, pos + len(needle)
        return self._divide(left, right)

    def _divide(self, left, right):
        buffer = self._buffer
        return (
            TextView(buffer, self._first, left),
            TextView(buffer, left, right),
            TextView(buffer, right, self._last),
            )

    # stripping

    def _left_edge(self, strip_me):
        buffer, pos, last = self._buffer, self._first, self._last
        while pos < last and strip_me(buffer[pos]):
            pos += 1
        return pos

    def _right_edge(self, strip_me):
        buffer, first, pos = self._buffer, self._first, self._last
        while pos > first and strip_me(buffer[pos - 1]):
            pos -= 1
        return pos

    def lstrip(self, chars=None):
        return TextView(self._buffer, self._left_edge(_strip_predicate(chars)), self._last)

    def rstrip(self, chars=None):
        return TextView(self._buffer, self._first, self._right_edge(_strip_predicate(chars)))

    def strip(self, chars=None):
        '''
        Trim both ends of the view.

        Args:
            chars (None | str | callable): What to trim, see lstrip/rstrip.
                Defaults to non-graphic characters.

        Returns:
            TextView: The trimmed sub-view. A fully trimmed view collapses
                to an empty view at its start.
        '''
        strip_me = _strip_predicate(chars)
        left = self._left_edge(strip_me)
        right = self._right_edge(strip_me)
        return TextView(self._buffer, min(left, right), right)

    # comparison

    def __eq__(self, other):
        if isinstance(other, TextView):
            if len(self) != len(other):
                return False
            if self._buffer is other._buffer and self._first == other._first:
                return True
            return self._buffer.startswith(str(other), self._first, self._last)
        if isinstance(other, str):
            return len(self) == len(other) and self._buffer.startswith(other, self._first, self._last)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, (TextView, str)):
            return str(self) < str(other)
        return NotImplemented

    def __hash__(self):
        return hash(str(self))


class ViewRuns:
    '''Lazy, restartable sequence of the maximal runs of kept characters in a view.'''

    __slots__ = ('_view', '_keep')

    def __init__(self, view, keep):
        self._view = view
        self._keep = keep

    def __iter__(self):
        view, keep = self._view, self._keep
        buffer, pos, last = view.buffer, view.first, view.last
        while pos < last:
            while pos < last and not keep(buffer[pos]):
                pos += 1
            start = pos
            while pos < last and keep(buffer[pos]):
                pos += 1
            if start < pos:
                yield TextView(buffer, start, pos)

    def __repr__(self):
        return f'ViewRuns({self._view!r})'
