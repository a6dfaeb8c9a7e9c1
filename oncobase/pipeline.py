# -*- coding: utf-8 -*-
'''
Corpus mining pipeline and command line entry point.

    corpus listing -> word distribution -> dictionary filter -> aggregate
    -> console report

Usage:
    oncobase [corpus] [dictionary] [--refresh URL [--unzip]]
             [--extensions .txt .nxml] [--min-count N] [--log-level LEVEL]

Created on Thu Oct 15 09:44:12 2026

@author: csvwwrw
'''

import argparse
import sys
from pathlib import Path
import requests
from config.config import Config
from config.logging_config import get_module_logger, setup_logging
from oncobase.articles import READABLE_EXTENSIONS, Article, find_articles
from oncobase.cooccurrence import CooccurrenceAggregator
from oncobase.dictionary import MedicalDictionary, filter_against_dictionary
from oncobase.distribution import compute_distribution, sort_by_count
from oncobase.remote_listing import RemoteRepository
from oncobase.report import print_report

setup_logging(log_level=Config.LOG_LEVEL)
_logger = get_module_logger(__name__)

PROGRESS_EVERY = 100


class OncobasePipeline:
    '''
    Sequential scan of a corpus into a co-occurrence aggregate.

    Articles are handled one at a time: load, distribution, filter, fold,
    then the text is dropped before the next article is read. The pipeline
    is the only writer of its aggregator.
    '''

    def __init__(self, dictionary, vocabulary=None, anchor=None, min_count=None):
        '''
        Args:
            dictionary (MedicalDictionary): Sorted medical words.
            vocabulary (Sequence[str], optional): Co-occurrence terms.
                Defaults to Config.VOCABULARY.
            anchor (str, optional): Qualification term. Defaults to
                Config.ANCHOR_TERM.
            min_count (int, optional): Words must occur more than this many
                times in an article. Defaults to Config.MIN_WORD_COUNT.
        '''
        self.dictionary = dictionary
        self.min_count = Config.MIN_WORD_COUNT if min_count is None else min_count
        self.aggregator = CooccurrenceAggregator(vocabulary, anchor)

    def process_text(self, text):
        '''
        Run one article text through distribution, filter and fold.

        Args:
            text (str): Article text.

        Returns:
            WordDistribution: Filtered distribution, count descending.
        '''
        distribution = compute_distribution(text)
        filtered = filter_against_dictionary(distribution, self.dictionary, self.min_count)
        filtered = sort_by_count(filtered, reverse=True)
        self.aggregator.fold(filtered)
        return filtered

    def process_article(self, article):
        return self.process_text(article.text)

    def run(self, corpus_dir=None, extensions=None):
        '''
        Scan every article of a corpus directory.

        Args:
            corpus_dir (str | Path, optional): Corpus root. Defaults to
                Config.CORPUS_DIR.
            extensions (Iterable[str], optional): Article suffixes.
                Defaults to Config.ARTICLE_EXTENSIONS.

        Returns:
            CooccurrenceAggregator: The aggregate, also kept on the pipeline.

        Raises:
            FileNotFoundError: If the corpus root does not exist.
        '''
        paths = find_articles(corpus_dir or Config.CORPUS_DIR, extensions)

        article = Article()
        for path in paths:
            _logger.debug(f'{self.aggregator.qualifying} {path}')
            article.load(path)
            self.process_article(article)
            article.clear()

            if self.aggregator.total % PROGRESS_EVERY == 0:
                _logger.info(f'Processed {self.aggregator.total}/{len(paths)} articles')

        _logger.info(
            f'Scan done: {self.aggregator.qualifying} qualifying of '
            f'{self.aggregator.total} articles'
            )
        return self.aggregator


def _normalize_extension(ext):
    ext = ext.strip().lower()
    return ext if ext.startswith('.') else f'.{ext}'


def build_parser():
    parser = argparse.ArgumentParser(
        prog='oncobase',
        description='Mine cancer term co-occurrences in a corpus of scientific articles.'
        )
    parser.add_argument(
        'corpus', nargs='?', default=str(Config.CORPUS_DIR),
        help='corpus directory (default: %(default)s)'
        )
    parser.add_argument(
        'dictionary', nargs='?', default=str(Config.DICTIONARY_PATH),
        help='medical word list, one word per line (default: %(default)s)'
        )
    parser.add_argument(
        '--refresh', metavar='URL', default=None,
        help='download new or changed files from a remote listing into the corpus first'
        )
    parser.add_argument(
        '--unzip', action='store_true',
        help='extract downloaded archives (with --refresh)'
        )
    parser.add_argument(
        '--extensions', nargs='+', default=list(Config.ARTICLE_EXTENSIONS),
        help='article file suffixes (default: %(default)s)'
        )
    parser.add_argument(
        '--min-count', type=int, default=Config.MIN_WORD_COUNT,
        help='keep words seen more than N times in an article (default: %(default)s)'
        )
    parser.add_argument(
        '--log-level', default=Config.LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], type=str.upper,
        help='logging level (default: %(default)s)'
        )
    return parser


def main(argv=None):
    '''
    Command line entry point.

    Args:
        argv (List[str], optional): Arguments, defaults to sys.argv[1:].

    Returns:
        int: Exit status, 0 on success and 1 on a fatal input error.
    '''
    args = build_parser().parse_args(argv)
    # report goes to stdout, logs to stderr
    setup_logging(log_level=args.log_level, stream=sys.stderr)

    if args.min_count < 0:
        _logger.error(f'--min-count must be >= 0, got {args.min_count}')
        return 1

    extensions = [_normalize_extension(ext) for ext in args.extensions]
    unsupported = sorted(set(extensions) - set(READABLE_EXTENSIONS))
    if unsupported:
        _logger.error(
            f'Unsupported article extensions {unsupported}, '
            f'expected some of {list(READABLE_EXTENSIONS)}'
            )
        return 1

    try:
        if args.refresh:
            corpus = Path(args.corpus)
            corpus.mkdir(parents=True, exist_ok=True)
            repository = RemoteRepository(args.refresh)
            repository.update()
            repository.upgrade(corpus, unzip=args.unzip)

        dictionary = MedicalDictionary.load(args.dictionary)
        pipeline = OncobasePipeline(dictionary, min_count=args.min_count)
        aggregator = pipeline.run(args.corpus, extensions=extensions)

    except (FileNotFoundError, requests.RequestException) as e:
        _logger.error(f'Run aborted: {e}')
        return 1

    print_report(aggregator)
    return 0


if __name__ == '__main__':
    sys.exit(main())
