#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
'''
INI document file format.
'''
import io

from ..codec import parse_into, serialize
from ..document import DocumentFormat, Document


class IniDocumentFormat(DocumentFormat):
    '''
    INI document file format, backed by :mod:`inidoc.codec`.

    This class should not be directly referenced. Instead, use the document
    :meth:`~inidoc.Document.load` and :meth:`~inidoc.Document.save` methods, passing
    *format='ini'* (the default).

    .. code-block:: python

        doc.save('filename.ini', format='ini')
        # or
        doc.load('filename.ini', format='ini')
    '''

    def __init__(self, encoding: str = 'utf-8'):
        '''
        :param encoding: text encoding of the serialized document
        '''
        self.encoding = encoding

    def dumps(self, document: Document) -> bytes:
        '''
        Serialize the document to INI :class:`bytes`.

        :param document: document to serialize
        :returns: the encoded INI content
        '''
        buffer = io.BytesIO()
        serialize(document, buffer, self.encoding)
        return buffer.getvalue()

    def loads(self, document: Document, content: bytes) -> None:
        '''
        Parse INI :class:`bytes` into *document*.

        :param document: document to populate
        :param content: encoded INI content
        :raises ~inidoc.codec.IniSyntaxError: the content is not valid INI
        '''
        parse_into(io.BytesIO(content), document, self.encoding)
