#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#

try:
    import yaml
except ImportError:  # pragma: no cover
    IS_AVAILABLE = False
else:
    IS_AVAILABLE = True

from inidoc.document import DocumentFormat, Document


class YamlDocumentFormat(DocumentFormat):
    '''
    YAML document file format. This format is only available when the ``PyYAML`` package is
    installed.

    This class should not be directly referenced. Instead, use the document
    :meth:`~inidoc.Document.load` and :meth:`~inidoc.Document.save` methods, passing
    *format='yaml'*.

    .. code-block:: python

        doc.save('filename.yml', format='yaml')
        # or
        doc.load('filename.yml', format='yaml')
    '''

    def __init__(self, root_key: str = None):
        '''
        By default, sections are placed at the top level of the YAML document. For example:

        .. code-block:: python

            >>> # assume doc.to_tree() == {'server': {'port': '80'}}
            >>> print(doc.dumps(format='yaml').decode())
            server:
              port: '80'

        The *root_key* argument can be specified to store all sections under a single top-level
        key:

        .. code-block:: python

            >>> print(doc.dumps(format='yaml', root_key='INI').decode())
            INI:
              server:
                port: '80'

        The *root_key* argument affects both how :meth:`loads` and :meth:`dumps` behave.

        :param root_key: the root key that the sections should be stored under
        '''
        if not IS_AVAILABLE:
            raise TypeError('YAML format is not available, please install "PyYAML"')

        self.root_key = root_key

    def dumps(self, document: Document) -> bytes:
        '''
        Serialize the document's basic value tree to a YAML :class:`bytes` document. Section and
        option order is kept.

        :param document: document to serialize
        :returns: the serialized document
        '''
        tree = document.to_tree()
        if self.root_key:
            tree = {self.root_key: tree}
        return yaml.dump(tree, Dumper=yaml.SafeDumper, sort_keys=False).encode()

    def loads(self, document: Document, content: bytes) -> None:
        '''
        Deserialize a YAML document and load the resulting tree into *document*. If *root_key*
        was specified, only the tree under *root_key* is loaded, if it exists.

        :param document: document to populate
        :param content: content to deserialize
        :raises TypeError: the YAML document is not a mapping of mappings of strings
        '''
        tree = yaml.load(content.decode(), Loader=yaml.SafeLoader)
        if self.root_key and isinstance(tree, dict) and self.root_key in tree:
            tree = tree[self.root_key]
        if tree is None:
            return
        if not isinstance(tree, dict):
            raise TypeError('YAML document must be a mapping, not %s' % type(tree).__name__)
        document.load_tree(tree)
