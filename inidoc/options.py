#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
'''
Option storage for a single INI section.
'''
from typing import Dict, Iterator, List, Tuple


class OptionSet:
    '''
    The options of a single section: a mapping of option name to option value. Values are opaque
    strings and are never converted.

    When *ordered* is ``True``, the option set remembers the order in which each option name was
    first added and :meth:`list_names` returns the names in that order. Overwriting an existing
    option does not move it. When *ordered* is ``False``, :meth:`list_names` makes no guarantee
    about the order of the returned names.

    Option sets are created and owned by a :class:`~inidoc.document.Document` and should not be
    shared between documents.
    '''

    def __init__(self, ordered: bool = True):
        '''
        :param ordered: preserve the insertion order of option names
        '''
        self.ordered = ordered
        self._names = []  # type: List[str]
        self._options = {}  # type: Dict[str, str]

    def exists(self, name: str) -> bool:
        '''
        :param name: option name
        :returns: the option exists
        '''
        return name in self._options

    def add(self, name: str, value: str) -> bool:
        '''
        Add an option or overwrite the value of an existing option. An overwritten option keeps
        its original position.

        :param name: option name
        :param value: option value
        :returns: ``True``, adding an option always succeeds
        '''
        if self.ordered and name not in self._options:
            self._names.append(name)
        self._options[name] = value
        return True

    def get(self, name: str) -> Tuple[str, bool]:
        '''
        Get an option value.

        :param name: option name
        :returns: a ``(value, found)`` tuple, ``('', False)`` if the option does not exist
        '''
        if name not in self._options:
            return '', False
        return self._options[name], True

    def remove(self, name: str) -> bool:
        '''
        Remove an option.

        :param name: option name
        :returns: ``True`` if the option was removed, ``False`` if it did not exist
        '''
        if name not in self._options:
            return False

        del self._options[name]
        if self.ordered:
            # option names are unique so there is exactly one entry
            self._names.remove(name)
        return True

    def list_names(self) -> List[str]:
        '''
        :returns: the option names, in insertion order when the option set is ordered
        '''
        if self.ordered:
            return list(self._names)
        return list(self._options.keys())

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_names())

    def __repr__(self) -> str:
        items = ', '.join('%r: %r' % (name, self._options[name]) for name in self.list_names())
        return '<OptionSet ordered=%s {%s}>' % (self.ordered, items)
