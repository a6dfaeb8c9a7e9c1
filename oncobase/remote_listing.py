# -*- coding: utf-8 -*-
'''
Remote article repository: listing parsing, incremental download, unpacking.

The listing is an HTML index in the layout wget generates for FTP
directories, one entry per line:

    2016 Jan 05 12:00  File        <a href="https://host/dir/a.tar.gz">a.tar.gz</a>  (123,456 bytes)

Entries are parsed with TextView partitions instead of a markup parser.
Archive extraction runs on a single background worker so the next download
can proceed; at most one extraction is in flight.

Created on Wed Oct 14 10:08:35 2026

@author: csvwwrw
'''

import gzip
import re
import shutil
import tarfile
import zipfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urljoin, urlparse
import requests
from config.config import Config
from config.logging_config import get_module_logger, setup_logging
from oncobase.text_view import TextView

_logger = get_module_logger(__name__)

ENTRY_LINE_RX = re.compile(r'(.+<a.*>[A-Za-z0-9].*</a>.+)')


@dataclass(frozen=True)
class RemoteFile:
    '''
    One entry of a remote listing.

    Attributes:
        url (str): Absolute link to the file.
        name (str): Anchor text shown in the listing.
        size (int): Size in bytes, 0 when unknown (directories).
        date (str): Modification date as printed in the listing.
    '''
    url: str
    name: str
    size: int = 0
    date: str = ''

    @property
    def filename(self):
        return Path(urlparse(self.url).path).name


def _leading_int(view):
    '''Integer made of the leading digits of view, thousands separators skipped; 0 if none.'''
    digits = []
    for ch in view:
        if ch.isdigit():
            digits.append(ch)
        elif ch != ',' or not digits:
            break
    return int(''.join(digits)) if digits else 0


def parse_listing_line(line, base_url=''):
    '''
    Parse one anchor line of a listing.

    Args:
        line (str | TextView): Listing line holding an <a> element.
        base_url (str): Listing address, used to resolve relative links.

    Returns:
        RemoteFile: Parsed entry.
    '''
    line = TextView.of(line)
    buffer = line.buffer

    # "<date> <kind>" precedes the anchor; drop the kind
    head = line.partition('<a')[0].strip()
    date = head.rpartition(' ')[0].strip()

    href = line.partition('"')[2].partition('"')[0].strip()

    rest = TextView(buffer, href.last, line.last)
    name = rest.partition('>')[2].partition('<')[0].strip()

    rest = TextView(buffer, name.last, line.last)
    size = rest.partition('(')[2].partition(')')[0].strip()

    url = urljoin(base_url, str(href)) if base_url else str(href)
    return RemoteFile(url=url, name=str(name), size=_leading_int(size), date=str(date))


def parse_listing(html, base_url=''):
    '''
    Parse every file entry of an HTML listing.

    Args:
        html (str): Listing page.
        base_url (str): Listing address, used to resolve relative links.

    Returns:
        List[RemoteFile]: Entries in listing order.
    '''
    return [
        parse_listing_line(TextView(html, m.start(), m.end()), base_url)
        for m in ENTRY_LINE_RX.finditer(html)
        ]


def is_archive(path):
    return Path(path).name.lower().endswith(Config.ARCHIVE_SUFFIXES)


def extract_archive(path):
    '''
    Unpack an archive next to itself.

    .tar.gz/.tgz and .zip are extracted into the archive's directory; .gz
    is decompressed into a sibling file without the suffix, keeping the
    original and overwriting a previous output.

    Args:
        path (str | Path): Archive file.

    Returns:
        bool: False if path is not a supported archive.
    '''
    path = Path(path)
    name = path.name.lower()
    directory = path.parent

    if name.endswith(('.tar.gz', '.tgz')):
        with tarfile.open(path, 'r:gz') as tar:
            tar.extractall(directory, filter='data')
    elif name.endswith('.gz'):
        with gzip.open(path, 'rb') as src, open(path.with_suffix(''), 'wb') as dst:
            shutil.copyfileobj(src, dst)
    elif name.endswith('.zip'):
        with zipfile.ZipFile(path) as archive:
            archive.extractall(directory)
    else:
        return False

    _logger.info(f'\tExtracted {path.name}')
    return True


def _await_extraction(pending):
    path, future = pending
    try:
        future.result()
    except (OSError, EOFError, tarfile.TarError, zipfile.BadZipFile) as e:
        _logger.error(f'Extraction failed for {path}: {e}')


class RemoteRepository:
    '''Mirror of a remote article listing into a local corpus directory.'''

    def __init__(self, address, timeout=None):
        '''
        Args:
            address (str): URL of the HTML listing.
            timeout (float, optional): Request timeout in seconds. Defaults
                to Config.REQUEST_TIMEOUT.
        '''
        self.address = address
        self.timeout = timeout or Config.REQUEST_TIMEOUT
        self._files = []

    @property
    def files(self):
        return list(self._files)

    def update(self):
        '''
        Refresh the list of remote files.

        Returns:
            List[RemoteFile]: Parsed listing.

        Raises:
            requests.RequestException: If the listing cannot be fetched.
        '''
        _logger.info(f'Fetching listing {self.address}')
        response = requests.get(self.address, timeout=self.timeout)
        response.raise_for_status()

        self._files = parse_listing(response.text, self.address)
        _logger.info(f'\tListing entries: {len(self._files)}')
        return self.files

    def download(self, remote, target):
        '''
        Stream one remote file to target.

        Data goes to "<target>.tmp" first and is renamed once complete.

        Raises:
            requests.RequestException: On HTTP failure.
            OSError: On local write failure.
        '''
        target = Path(target)
        partial = target.with_name(target.name + '.tmp')
        _logger.info(f'\tDownloading {remote.url}')
        try:
            with requests.get(remote.url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(partial, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=Config.DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            partial.replace(target)
        finally:
            partial.unlink(missing_ok=True)
        return target

    def upgrade(self, destination, unzip=False):
        '''
        Bring a local directory up to date with the listing.

        Files of known size are downloaded when missing locally, replaced
        when the local size differs, and skipped otherwise. Links containing
        ".tmp" are ignored. With unzip, every fresh archive is extracted in
        the background while the next download runs.

        Args:
            destination (str | Path): Local corpus directory.
            unzip (bool): Extract downloaded archives. Defaults to False.

        Returns:
            List[Path]: Files downloaded during this call.
        '''
        directory = Path(destination)
        if not directory.is_dir():
            _logger.warning(f'{directory} not found, nothing to upgrade')
            return []

        local_sizes = {p.name: p.stat().st_size for p in directory.iterdir() if p.is_file()}
        downloaded = []
        pending = None

        with ThreadPoolExecutor(max_workers=1, thread_name_prefix='oncobase-unzip') as executor:
            for remote in self._files:
                filename = remote.filename
                if remote.size <= 0 or not filename or '.tmp' in remote.url:
                    continue

                local_size = local_sizes.get(filename)
                if local_size == remote.size:
                    continue

                target = directory / filename
                if local_size is not None:
                    _logger.info(f'\tSize changed for {filename}: {local_size} -> {remote.size}')
                    target.unlink(missing_ok=True)

                try:
                    self.download(remote, target)
                except (requests.RequestException, OSError) as e:
                    _logger.error(f'Download failed for {remote.url}: {e}')
                    continue
                downloaded.append(target)

                if unzip and is_archive(target):
                    if pending is not None:
                        _await_extraction(pending)
                    pending = (target, executor.submit(extract_archive, target))

            if pending is not None:
                _await_extraction(pending)

        _logger.info(f'Upgrade done: {len(downloaded)} files downloaded into {directory}')
        return downloaded

    def unzip(self, destination):
        '''
        Extract every archive already present in a directory.

        Args:
            destination (str | Path): Local corpus directory.

        Returns:
            List[Path]: Archives that were extracted.
        '''
        directory = Path(destination)
        if not directory.is_dir():
            _logger.warning(f'{directory} not found, nothing to unzip')
            return []

        extracted = []
        for path in sorted(p for p in directory.iterdir() if p.is_file()):
            if '.tmp' in path.name:
                continue
            if extract_archive(path):
                extracted.append(path)
        return extracted


if __name__ == '__main__':
    setup_logging(log_level='INFO')

    if not Config.REMOTE_LISTING_URL:
        _logger.error('ONCOBASE_REMOTE_URL not set')
    else:
        Config.CORPUS_DIR.mkdir(parents=True, exist_ok=True)
        repository = RemoteRepository(Config.REMOTE_LISTING_URL)
        repository.update()
        repository.upgrade(Config.CORPUS_DIR, unzip=True)
