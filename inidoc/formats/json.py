#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
'''
JSON document file format.
'''
import json
from ..document import DocumentFormat, Document


class JsonDocumentFormat(DocumentFormat):
    '''
    JSON document file format. The document is stored as a JSON object of section name to an
    object of option name to string value.

    This class should not be directly referenced. Instead, use the document
    :meth:`~inidoc.Document.load` and :meth:`~inidoc.Document.save` methods, passing
    *format='json'*.

    .. code-block:: python

        doc.save('filename.json', format='json')
        # or
        doc.load('filename.json', format='json')
    '''

    def __init__(self, pretty: bool = True):
        '''
        :param pretty: pretty-print the JSON document in the call to :meth:`json.dumps`
        '''
        self.pretty = pretty

    def dumps(self, document: Document) -> bytes:
        '''
        Serialize the document's basic value tree to a JSON :class:`bytes` document.

        :param document: document to serialize
        :returns: the serialized document
        '''
        return json.dumps(document.to_tree(), indent=2 if self.pretty else None).encode()

    def loads(self, document: Document, content: bytes) -> None:
        '''
        Deserialize a JSON document and load the resulting tree into *document*.

        :param document: document to populate
        :param content: content to deserialize
        :raises TypeError: the JSON document is not an object of objects of strings
        '''
        tree = json.loads(content.decode())
        if not isinstance(tree, dict):
            raise TypeError('JSON document must be an object, not %s' % type(tree).__name__)
        document.load_tree(tree)
