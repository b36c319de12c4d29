#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
'''
The INI document model and the document file format base class.
'''
import os
from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple, Type, Union

from .options import OptionSet

DocumentTree = Dict[str, Dict[str, str]]


class Document:
    '''
    An INI document: a collection of named sections, each holding an :class:`OptionSet`.

    .. code-block:: python

        doc = Document()
        doc.add_option('server', 'port', '8080')
        value, found = doc.get_option('server', 'port')

    The *ordered* flag is fixed when the document is created and is passed down to every section.
    An ordered document returns section and option names in the order they were first added. An
    unordered document returns them in no particular order.

    Missing sections and options are not errors. Queries and mutations return ``False`` (or a
    ``(value, found)`` tuple) when the section or option does not exist.

    Options that appear before the first section header of an INI file belong to the section named
    ``''``.
    '''

    def __init__(self, ordered: bool = True):
        '''
        :param ordered: preserve the insertion order of section and option names
        '''
        self._ordered = ordered
        self._section_names = []  # type: List[str]
        self._sections = {}  # type: Dict[str, OptionSet]

    @property
    def ordered(self) -> bool:
        '''
        :returns: the document preserves insertion order
        '''
        return self._ordered

    def has_section(self, name: str) -> bool:
        '''
        :param name: section name
        :returns: the section exists
        '''
        return name in self._sections

    def has_option(self, section: str, name: str) -> bool:
        '''
        :param section: section name
        :param name: option name
        :returns: the section exists and contains the option
        '''
        options = self._sections.get(section)
        if options is None:
            return False
        return options.exists(name)

    def add_section(self, name: str) -> bool:
        '''
        Add an empty section.

        :param name: section name
        :returns: ``True`` if the section was created, ``False`` if it already exists
        '''
        if name in self._sections:
            return False

        self._sections[name] = OptionSet(self._ordered)
        if self._ordered:
            self._section_names.append(name)
        return True

    def add_option(self, section: str, name: str, value: str) -> bool:
        '''
        Add an option or overwrite an existing option's value. The section is created if it does
        not exist.

        :param section: section name
        :param name: option name
        :param value: option value
        :returns: ``True``, adding an option always succeeds
        '''
        if section not in self._sections:
            self.add_section(section)
        return self._sections[section].add(name, value)

    def get_option(self, section: str, name: str) -> Tuple[str, bool]:
        '''
        Get an option value.

        :param section: section name
        :param name: option name
        :returns: a ``(value, found)`` tuple, ``('', False)`` when the section or the option does
            not exist
        '''
        options = self._sections.get(section)
        if options is None:
            return '', False
        return options.get(name)

    def remove_section(self, name: str) -> bool:
        '''
        Remove a section and all of its options.

        :param name: section name
        :returns: ``True`` if the section was removed, ``False`` if it did not exist
        '''
        if name not in self._sections:
            return False

        del self._sections[name]
        if self._ordered:
            self._section_names.remove(name)
        return True

    def remove_option(self, section: str, name: str) -> bool:
        '''
        Remove an option from a section. The section itself is kept, even when it becomes empty.

        :param section: section name
        :param name: option name
        :returns: ``True`` if the option was removed, ``False`` if the section or option did not
            exist
        '''
        options = self._sections.get(section)
        if options is None:
            return False
        return options.remove(name)

    def list_sections(self) -> List[str]:
        '''
        :returns: the section names, in insertion order when the document is ordered
        '''
        if self._ordered:
            return list(self._section_names)
        return list(self._sections.keys())

    def list_options(self, section: str) -> List[str]:
        '''
        :param section: section name
        :returns: the option names of the section, an empty list if the section does not exist
        '''
        options = self._sections.get(section)
        if options is None:
            return []
        return options.list_names()

    def to_tree(self) -> DocumentTree:
        '''
        Convert the document to a basic value tree: a ``dict`` of section name to a ``dict`` of
        option name to value. The dicts are built in :meth:`list_sections` and
        :meth:`list_options` order.

        :returns: the basic value tree
        '''
        tree = {}  # type: DocumentTree
        for section in self.list_sections():
            options = self._sections[section]
            tree[section] = {name: options.get(name)[0] for name in options.list_names()}
        return tree

    def load_tree(self, tree: Mapping) -> None:
        '''
        Add every section and option in a basic value tree to the document. Existing options are
        overwritten. The whole tree is checked before the document is modified, so the document is
        left unchanged when a :class:`TypeError` is raised.

        :param tree: a mapping of section name to a mapping of option name to value
        :raises TypeError: a section is not a mapping or a name or value is not a :class:`str`
        '''
        for section, options in tree.items():
            if not isinstance(section, str):
                raise TypeError('section name must be a str: %r' % (section,))
            if not isinstance(options, Mapping):
                raise TypeError('section %r must be a mapping, not %s' %
                                (section, type(options).__name__))

            for name, value in options.items():
                if not isinstance(name, str) or not isinstance(value, str):
                    raise TypeError('option %r in section %r must be a str pair' %
                                    (name, section))

        for section, options in tree.items():
            self.add_section(section)
            for name, value in options.items():
                self.add_option(section, name, value)

    def save(self, filename: str, format: str = 'ini') -> None:
        '''
        Save the document to a file.

        :param filename: destination file path
        :param format: output format
        '''
        content = self.dumps(format)
        filename = os.path.expanduser(filename)
        with open(filename, 'wb') as file:
            file.write(content)

    def dumps(self, format: str = 'ini', **kwargs) -> bytes:
        '''
        Serialize the document with the specified format.

        :param format: output format
        :param kwargs: additional keyword arguments to pass to the format's ``__init__()``
        :returns: serialized document content
        '''
        formatter = DocumentFormat.get(format, **kwargs)
        return formatter.dumps(self)

    def load(self, filename: str, format: str = 'ini') -> None:
        '''
        Load sections and options from a file into the document.

        :param filename: source filename
        :param format: source format
        '''
        filename = os.path.expanduser(filename)
        with open(filename, 'rb') as file:
            content = file.read()

        self.loads(content, format)

    def loads(self, content: Union[str, bytes], format: str = 'ini', **kwargs) -> None:
        '''
        Load sections and options from a str or bytes into the document.

        :param content: serialized content
        :param format: content format
        :param kwargs: additional keyword arguments to pass to the format's ``__init__()``
        '''
        if isinstance(content, str):
            content = content.encode()

        formatter = DocumentFormat.get(format, **kwargs)
        formatter.loads(self, content)

    def __contains__(self, name: str) -> bool:
        return self.has_section(name)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_sections())

    def __repr__(self) -> str:
        return '<Document ordered=%s sections=%r>' % (self._ordered, self.list_sections())


def new_document(ordered: bool = True) -> Document:
    '''
    Create an empty document.

    :param ordered: preserve the insertion order of section and option names
    :returns: the new document
    '''
    return Document(ordered)


class DocumentFormat:
    '''
    The base class for all document file formats.
    '''
    __registry: Dict[str, Type['DocumentFormat']] = {}
    __initialized: bool = False

    @classmethod
    def register(cls, name: str, format_cls: Type['DocumentFormat']) -> None:
        '''
        Register a new document format.

        :param name: format name
        :param format_cls: ``DocumentFormat`` subclass to register
        '''
        cls.__registry[name] = format_cls

    @classmethod
    def get(cls, name: str, **kwargs) -> 'DocumentFormat':
        '''
        Get a registered document format.

        :param name: format name
        :param kwargs: keyword arguments to pass into the format ``__init__()`` method
        :raises KeyError: the format is not registered
        :returns: the format instance
        '''
        if not cls.__initialized:
            cls.initialize_registry()

        format_cls = cls.__registry[name]
        return format_cls(**kwargs)  # type: ignore

    @classmethod
    def initialize_registry(cls) -> None:
        '''
        Initialize the format registry for built-in formats.
        '''
        if cls.__initialized:
            return

        from .formats import FORMATS  # pylint: disable=cyclic-import, import-outside-toplevel
        for name, format_cls in FORMATS:
            cls.__registry[name] = format_cls

        cls.__initialized = True

    def dumps(self, document: Document) -> bytes:
        '''
        Serialize the document to a bytes object.

        :param document: document to serialize
        :returns: the serialized document
        '''
        raise NotImplementedError()

    def loads(self, document: Document, content: bytes) -> None:
        '''
        Parse serialized content and add its sections and options to *document*.

        :param document: document to populate
        :param content: serialized content
        '''
        raise NotImplementedError()
