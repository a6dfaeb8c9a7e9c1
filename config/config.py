# -*- coding: utf-8 -*-
'''
Global configuration for the oncobase corpus miner.

All paths, analysis constants and remote settings centralized here.
Import with: from config.config import Config

Created on Mon Oct 12 10:02:17 2026

@author: csvwwrw
'''

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Config:
    '''
    Centralized configuration class for the corpus mining pipeline.

    Contains paths, the cancer term vocabulary, filtering thresholds and
    remote refresh settings. All modules import from this single source of
    truth.
    '''

    PROJECT_ROOT = Path(__file__).parent.parent
    DATA_DIR = PROJECT_ROOT / 'data'
    LOGS_DIR = PROJECT_ROOT / 'logs'

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    LOGS_DIR.mkdir(parents=True, exist_ok=True)

    CORPUS_DIR = Path(os.getenv('ONCOBASE_CORPUS_DIR', str(DATA_DIR / 'pubmed')))
    DICTIONARY_PATH = Path(os.getenv('ONCOBASE_DICTIONARY', str(DATA_DIR / 'medical_dictionary.txt')))

    ARTICLE_EXTENSIONS = ('.txt',)
    MARKUP_EXTENSIONS = ('.nxml',)
    ARTICLE_ENCODING = 'utf-8'

    ANCHOR_TERM = 'cancer'
    CANCER_TERMS = (
        'breast', 'treatment', 'carcinoma', 'chemotherapy', 'colorectal',
        'ovarian', 'gastric', 'doxorubicin', 'cytoplasmic', 'gemcitabine',
        'carboplatin', 'fibroblasts', 'irinotecan', 'macrophages', 'arm',
        'peptide', 'intracellular', 'papillomavirus', 'pregnancy', 'calcium',
        'lung', 'serum', 'prostate', 'melanoma', 'renal'
        )
    VOCABULARY = (ANCHOR_TERM,) + CANCER_TERMS

    # words need strictly more occurrences than this to survive filtering
    MIN_WORD_COUNT = 3

    REMOTE_LISTING_URL = os.getenv('ONCOBASE_REMOTE_URL', '')
    REQUEST_TIMEOUT = 90
    DOWNLOAD_CHUNK_SIZE = 1 << 16
    ARCHIVE_SUFFIXES = ('.tar.gz', '.tgz', '.gz', '.zip')

    LOG_LEVEL = os.getenv('ONCOBASE_LOG_LEVEL', 'INFO')
    LOG_FILE = LOGS_DIR / 'oncobase.log'
    LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
    LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def validate_config():
    '''
    Validate critical configuration parameters.

    Checks input paths exist and analysis settings are consistent.
    Logs warnings for missing optional inputs.

    Raises:
        ValueError: If critical settings invalid.
    '''
    import logging
    logger = logging.getLogger(__name__)

    if not Config.CORPUS_DIR.exists():
        logger.warning(f'Corpus directory not found: {Config.CORPUS_DIR}')

    if not Config.DICTIONARY_PATH.exists():
        logger.warning(f'Medical dictionary not found: {Config.DICTIONARY_PATH}')

    if not Config.REMOTE_LISTING_URL:
        logger.info('ONCOBASE_REMOTE_URL not set, remote refresh disabled')

    if Config.MIN_WORD_COUNT < 0:
        raise ValueError(f'MIN_WORD_COUNT must be >= 0, got {Config.MIN_WORD_COUNT}')

    if Config.ANCHOR_TERM not in Config.VOCABULARY:
        raise ValueError(f'Anchor term {Config.ANCHOR_TERM!r} missing from vocabulary')

    if len(set(Config.VOCABULARY)) != len(Config.VOCABULARY):
        raise ValueError('VOCABULARY contains duplicate terms')

    logger.info('Configuration validated')


if __name__ == '__main__':
    # Test configuration
    print('Oncobase configuration:')
    print(f'\tProject root: {Config.PROJECT_ROOT}')
    print(f'\tCorpus dir: {Config.CORPUS_DIR}')
    print(f'\tDictionary: {Config.DICTIONARY_PATH}')
    print(f'\tVocabulary: {len(Config.VOCABULARY)} terms')
    print(f'\tRemote listing: {Config.REMOTE_LISTING_URL or "Missing"}')

    validate_config()
