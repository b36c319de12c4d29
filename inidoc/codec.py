#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
'''
INI text parser and serializer.

The accepted syntax is line oriented:

.. code-block:: ini

    ; comment
    # also a comment
    global = option before any section header

    [section]
    key = value
    empty =

Each line is stripped of surrounding whitespace. Blank lines and lines starting with ``;`` or
``#`` are skipped. A line containing ``=`` is an assignment: the key is everything before the first
``=`` and the value is everything after it, both stripped. Otherwise, a line wrapped in ``[`` and
``]`` is a section header. Anything else is a syntax error.

Known quirks, kept for compatibility:

- the section name is captured up to the *last* ``]``, so ``[a]junk]`` is section ``a]junk``
  while ``[a] junk`` is a syntax error
- assignments are matched before headers, so ``[a=b]`` is the option ``[a`` with value ``b]``
- values containing newlines and names containing ``=``, ``[`` or ``]`` are written as-is and do
  not survive a round trip
'''
import io
import logging
import os
import re
from typing import Any, Optional, Union

from .document import Document
from .streams import IReader, as_reader, as_writer

logger = logging.getLogger(__name__)

SECTION_RE = re.compile(r'\[(.*)\]')
ASSIGN_RE = re.compile(r'([^=]+)=(.*)')
COMMENT_CHARS = (';', '#')


class IniSyntaxError(ValueError):
    '''
    A line that is not blank, a comment, an assignment or a section header.
    '''

    def __init__(self, line: int, source: str, document: Optional[Document] = None):
        '''
        :param line: 1-based line number
        :param source: content of the line, without surrounding whitespace
        :param document: the partially parsed document, only useful for diagnostics
        '''
        super().__init__(line, source)
        self.line = line
        self.source = source
        self.document = document

    def __str__(self):
        return 'invalid INI syntax on line %d: %s' % (self.line, self.source)


def parse_into(stream: Any, document: Document, encoding: str = 'utf-8') -> Document:
    '''
    Parse INI content from a stream and add the sections and options to an existing document.
    Existing options with the same name are overwritten.

    :param stream: text stream, or binary stream decoded with *encoding*
    :param document: document to populate
    :param encoding: encoding of a binary stream
    :raises IniSyntaxError: a line could not be parsed, parsing stops at the first error
    :returns: *document*
    '''
    with as_reader(stream, encoding) as reader:
        _parse_lines(reader, document)
    return document


def _parse_lines(reader: IReader, document: Document) -> None:
    section = ''
    lineno = 0
    while True:
        raw = reader.readline()
        if not raw:
            break

        lineno += 1
        line = raw.strip()
        if not line or line[0] in COMMENT_CHARS:
            continue

        match = ASSIGN_RE.fullmatch(line)
        if match:
            document.add_option(section, match.group(1).strip(), match.group(2).strip())
            continue

        match = SECTION_RE.fullmatch(line)
        if match:
            section = match.group(1).strip()
            document.add_section(section)
            continue

        logger.debug('INI syntax error on line %d', lineno)
        raise IniSyntaxError(lineno, line, document)


def parse(stream: Any, ordered: bool = True, encoding: str = 'utf-8') -> Document:
    '''
    Parse INI content from a stream into a new document.

    :param stream: text stream, or binary stream decoded with *encoding*
    :param ordered: preserve the order of sections and options
    :param encoding: encoding of a binary stream
    :raises IniSyntaxError: a line could not be parsed
    :returns: the parsed document
    '''
    return parse_into(stream, Document(ordered), encoding)


def parse_file(path: str, ordered: bool = True, encoding: str = 'utf-8') -> Document:
    '''
    Parse an INI file.

    :param path: file path, ``~`` is expanded
    :param ordered: preserve the order of sections and options
    :param encoding: file encoding
    :raises IniSyntaxError: a line could not be parsed
    :raises OSError: the file could not be opened or read
    :returns: the parsed document
    '''
    path = os.path.expanduser(path)
    with open(path, 'r', encoding=encoding, newline='\n') as file:
        document = parse(file, ordered)

    logger.debug('parsed %d sections from %s', len(document), path)
    return document


def loads(content: Union[str, bytes], ordered: bool = True,
          encoding: str = 'utf-8') -> Document:
    '''
    Parse INI content from a str or bytes.

    :param content: INI content
    :param ordered: preserve the order of sections and options
    :param encoding: encoding of *content* when it is :class:`bytes`
    :raises IniSyntaxError: a line could not be parsed
    :returns: the parsed document
    '''
    if isinstance(content, bytes):
        content = content.decode(encoding)
    return parse(io.StringIO(content), ordered)


def serialize(document: Document, sink: Any, encoding: str = 'utf-8') -> None:
    '''
    Write a document as INI text. Every section is written as a ``[name]`` header followed by one
    ``name = value`` line per option and a blank line. Nothing is escaped.

    :param document: document to write
    :param sink: text stream, or binary stream encoded with *encoding*
    :param encoding: encoding of a binary stream
    :raises OSError: writing to the sink failed, the remaining output is not written
    '''
    with as_writer(sink, encoding) as writer:
        for section in document.list_sections():
            writer.write('[%s]\n' % section)
            for name in document.list_options(section):
                value = document.get_option(section, name)[0]
                writer.write('%s = %s\n' % (name, value))
            writer.write('\n')


def serialize_file(document: Document, path: str, encoding: str = 'utf-8') -> None:
    '''
    Write a document to an INI file, replacing any existing content.

    :param document: document to write
    :param path: file path, ``~`` is expanded
    :param encoding: file encoding
    :raises OSError: the file could not be created or written
    '''
    path = os.path.expanduser(path)
    with open(path, 'w', encoding=encoding, newline='\n') as file:
        serialize(document, file)

    logger.debug('wrote %d sections to %s', len(document), path)


def dumps(document: Document) -> str:
    '''
    Serialize a document to a str.

    :param document: document to serialize
    :returns: the INI content
    '''
    buffer = io.StringIO()
    serialize(document, buffer)
    return buffer.getvalue()
