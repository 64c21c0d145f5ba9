# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/11 01:04:45
# @Author : Kariko Lin

"""INI reader for options files, shaped like this:

    ```ini
    nout = 10           ; pairs before any header go to the root
    restart             # a bare flag, same as `restart = TRUE`

    [mesh]
    nx = 68
    [solver]
    type = "PETSC"      ; quoted values keep their case
    ```

Outside double quotes everything is lower-cased. Comments begin at the
first `#` or `;` *even inside quotes*, which is how these files have
always been read, so keep it.

Every `[section]` is looked up on the root tree,
no matter which section the reader is currently in.
"""

import logging
from io import StringIO, TextIOBase

import chardet

from .errors import (
    ConfigNotFound, EmptyKeyOrValue, MalformedSection, MissingSectionName,
    UndecodableConfig
)
from .model import Options
from ..abstract import OptionReader

__all__ = [
    'OptionINI', 'strip_comment', 'trim',
    'lowercase_unquoted', 'normalize_line', 'parse_line'
]

COMMENT_CHARS = '#;'
WHITESPACE = ' \t\r\n'
FLAG_VALUE = 'TRUE'

logger = logging.getLogger(__name__)


def strip_comment(line: str) -> str:
    """Cut `line` at the first `#` or `;`, whichever comes first."""
    cut = min(
        (i for i in map(line.find, COMMENT_CHARS) if i >= 0),
        default=len(line))
    return line[:cut]


def trim(s: str, chars: str = WHITESPACE) -> str:
    return s.strip(chars)


def lowercase_unquoted(line: str) -> str:
    """Lower-case `line` except inside double quotes.

    A quote escaped by a backslash doesn't open or close anything.
    """
    ret: list[str] = []
    quoted = escaped = False
    for c in line:
        if c == '"' and not escaped:
            quoted = not quoted
        elif not quoted:
            c = c.lower()
        ret.append(c)
        escaped = c == '\\' and not escaped
    return ''.join(ret)


def normalize_line(line: str) -> str:
    return lowercase_unquoted(trim(strip_comment(line)))


def parse_line(line: str, source: str | None = None) -> tuple[str, str]:
    """Split a normalized `key = value` line at its first `=`.

    Without any `=` the line is a flag, valued `TRUE`.
    """
    key, sep, value = line.partition('=')
    if not sep:
        return line, FLAG_VALUE

    key = trim(key, WHITESPACE + '"')
    value = trim(value, WHITESPACE + '"')
    if not key or not value:
        raise EmptyKeyOrValue(line, source)
    return key, value


class OptionINI(OptionReader[Options]):
    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase, options: Options, source: str = ''
    ) -> Options:
        """读取解码好的字符串流，写入`options`。

        `source` is only recorded along with each value.
        Any error stops the reading at once,
        with pairs read so far *left in* `options`.
        """
        section, cnt = options, 0
        while raw := buf.readline():
            line = normalize_line(raw)
            if not line:
                continue

            if '[' in line:
                if ']' not in line:
                    raise MalformedSection(source, line)
                name = trim(line, '[]')
                if not name:
                    raise MissingSectionName(source, line)
                section = options.get_section(name)
                logger.debug('%s: entering %s', source, section)
            else:
                key, value = parse_line(line, source)
                section.set(key, value, source)
                cnt += 1

        logger.debug('%s: %d option(s) read', source, cnt)
        return options

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        """Re-read `filename` as bytes and decode it by a `chardet` guess.

        Unsure guesses count as UTF-8, and GBK is the last resort.
        Raises `ConfigNotFound` if the file went away in between,
        `UndecodableConfig` if nothing decodes it.
        """
        try:
            with open(filename, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise ConfigNotFound(filename) from e

        guess = chardet.detect(raw)
        codec = guess['encoding']
        if codec is None or guess['confidence'] < 0.8:
            codec = 'utf-8'

        for i in dict.fromkeys((codec, 'gbk')):
            try:
                return StringIO(raw.decode(i))
            except (UnicodeDecodeError, LookupError) as e:
                err = e
        raise UndecodableConfig(filename) from err

    def read(self, options: Options, filename: str) -> None:
        """Read `filename` into `options`, tagging values with `filename`.

        Raises `ConfigNotFound` if the file can't be opened,
        `UndecodableConfig` if no encoding tried fits it.
        """
        logger.debug('Reading options from %s', filename)
        try:
            # when encoding is None, `open()` would fallback to system default.
            fp = open(filename, 'r', encoding=self._codec)
        except OSError as e:
            raise ConfigNotFound(filename) from e

        try:
            with fp:
                self.readstream(fp, options, filename)
        except UnicodeDecodeError:
            # and when encoding got wrong, start over with `chardet`.
            logger.warning(
                '%s is not %s encoded, guessing its encoding.',
                filename, self._codec or 'system default')
            self.readstream(self._decode_file(filename), options, filename)

    def readfiles(self, options: Options, *filenames: str) -> Options:
        """依次读取多个文件。后读到的值覆盖先前的。"""
        for i in filenames:
            self.read(options, i)
        return options

    def __str__(self) -> str:
        return f"INI options reader ({self._codec or 'system default'})"
