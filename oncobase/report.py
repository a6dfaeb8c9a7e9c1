# -*- coding: utf-8 -*-
'''
Console report of the corpus aggregate.

Created on Wed Oct 14 16:52:19 2026

@author: csvwwrw
'''

SEPARATOR = '=' * 40


def render_report(aggregator):
    '''
    Render the aggregate as console text.

    Layout:
        - separator, then "<word> <count>" lines ascending by count
        - separator, then "<qualifying> <total>"
        - separator, then "<term_a> <term_b> <count>" for every vocabulary
          pair in nested order

    Args:
        aggregator (CooccurrenceAggregator): Aggregate after a corpus run.

    Returns:
        str: Report text, newline terminated.
    '''
    lines = [SEPARATOR]
    lines.extend(f'{word} {count}' for word, count in aggregator.word_totals())
    lines.append(SEPARATOR)
    lines.append(f'{aggregator.qualifying} {aggregator.total}')
    lines.append(SEPARATOR)
    lines.extend(f'{a} {b} {count}' for a, b, count in aggregator.triples())
    return '\n'.join(lines) + '\n'


def print_report(aggregator):
    print(render_report(aggregator), end='')
