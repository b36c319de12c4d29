#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
'''
Stream interfaces used by the INI codec.

The codec only ever needs two capabilities: reading a line of text and writing a chunk of text.
Text file objects (``open(..., 'r')``, :class:`io.StringIO`, :class:`sys.stdin`) already provide
both and are used as-is. Binary streams are decoded and encoded by the :func:`as_reader` and
:func:`as_writer` context managers.
'''
import io
from contextlib import contextmanager
from typing import Any, Iterator


class IReader:
    '''
    Interface class for a line source. :meth:`readline` must behave like
    :meth:`io.TextIOBase.readline`: return the next line, including the trailing newline when
    present, and an empty string once the end of the stream has been reached.
    '''

    def readline(self) -> str:
        '''
        Read the next line.

        :returns: the next line or ``''`` at the end of the stream
        '''
        raise NotImplementedError()


class IWriter:
    '''
    Interface class for a text sink.
    '''

    def write(self, text: str) -> Any:
        '''
        Write text to the sink. Errors must be raised, not swallowed.

        :param text: text to write
        '''
        raise NotImplementedError()


def is_binary(stream: Any) -> bool:
    '''
    :param stream: stream to check
    :returns: the stream reads and writes :class:`bytes` rather than :class:`str`
    '''
    return isinstance(stream, (io.RawIOBase, io.BufferedIOBase))


@contextmanager
def as_reader(stream: Any, encoding: str = 'utf-8') -> Iterator[IReader]:
    '''
    Get a line reader for a stream. Text streams are yielded unchanged. Binary streams are wrapped
    in a :class:`io.TextIOWrapper` that only splits lines on ``\\n`` and is detached on exit, so
    the caller's stream is left open.

    .. code-block:: python

        with as_reader(stream, 'utf-16') as reader:
            line = reader.readline()

    :param stream: text or binary stream
    :param encoding: encoding used to decode a binary stream
    :returns: a context manager yielding the line reader
    '''
    if not is_binary(stream):
        yield stream
        return

    wrapper = io.TextIOWrapper(stream, encoding=encoding, newline='\n')
    try:
        yield wrapper
    finally:
        wrapper.detach()


@contextmanager
def as_writer(stream: Any, encoding: str = 'utf-8') -> Iterator[IWriter]:
    '''
    Get a text writer for a stream. Text streams are yielded unchanged. Binary streams are wrapped
    in a :class:`io.TextIOWrapper` that writes ``\\n`` untranslated. The wrapper is flushed and
    detached on exit, so the caller's stream is left open and a byte order mark, if the encoding
    has one, is written only once.

    :param stream: text or binary stream
    :param encoding: encoding used to encode text written to a binary stream
    :returns: a context manager yielding the text writer
    '''
    if not is_binary(stream):
        yield stream
        return

    wrapper = io.TextIOWrapper(stream, encoding=encoding, newline='\n')
    try:
        yield wrapper
    finally:
        # detach() flushes buffered text to the stream first
        wrapper.detach()
