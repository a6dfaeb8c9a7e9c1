# -*- coding: utf-8 -*-
'''
Scientific articles on disk: corpus traversal and text loading.

Plain text (.txt) and markup (.nxml) articles are both read as raw text;
markup is not parsed.

Created on Tue Oct 13 14:26:51 2026

@author: csvwwrw
'''

from pathlib import Path
from config.config import Config
from config.logging_config import get_module_logger
from oncobase.distribution import compute_distribution

_logger = get_module_logger(__name__)

READABLE_EXTENSIONS = Config.ARTICLE_EXTENSIONS + Config.MARKUP_EXTENSIONS


def find_articles(root, extensions=None):
    '''
    Recursively collect article files under a corpus root.

    Args:
        root (str | Path): Corpus directory.
        extensions (Iterable[str], optional): Accepted suffixes, dot
            included (e.g. '.txt'). Defaults to Config.ARTICLE_EXTENSIONS.

    Returns:
        List[Path]: Regular files with an accepted suffix, sorted by path.

    Raises:
        FileNotFoundError: If root does not exist or is not a directory.
    '''
    root = Path(root)
    if extensions is None:
        extensions = Config.ARTICLE_EXTENSIONS
    extensions = {ext.lower() for ext in extensions}

    if not root.is_dir():
        raise FileNotFoundError(f'Corpus directory not found: {root}')

    paths = sorted(
        p for p in root.rglob('*')
        if p.suffix.lower() in extensions and p.is_file()
        )
    _logger.info(f'Found {len(paths)} articles under {root}')
    return paths


class Article:
    '''
    One article of the corpus and its raw text.

    The text is only held between load() and clear(), so that a scan keeps a
    single article in memory at a time.
    '''

    def __init__(self, path=None):
        self.path = Path(path) if path else None
        self.text = ''

    def load(self, path=None, encoding=Config.ARTICLE_ENCODING):
        '''
        Read the article text from disk.

        Files that cannot be read or decoded leave the text empty: the
        article then yields an empty distribution instead of failing the
        run.

        Args:
            path (str | Path, optional): New article path. Defaults to the
                current one.
            encoding (str): Text encoding. Defaults to utf-8.

        Returns:
            Article: self, for chaining.
        '''
        if path:
            self.path = Path(path)
        self.text = ''

        if self.path is None:
            return self

        if self.path.suffix.lower() not in READABLE_EXTENSIONS:
            _logger.warning(f'Skipping unsupported article type: {self.path}')
            return self

        try:
            self.text = self.path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            _logger.warning(f'Unreadable article {self.path}: {e}')

        return self

    def clear(self):
        self.text = ''

    def compute_distribution(self):
        return compute_distribution(self.text)

    def __iter__(self):
        return iter(self.text)

    def __str__(self):
        return self.text

    def __repr__(self):
        return f'Article({str(self.path)!r}, {len(self.text)} chars)'
