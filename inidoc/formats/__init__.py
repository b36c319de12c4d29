#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
"""
Built-in document file formats.
"""
from typing import List, Tuple, Type

from ..document import DocumentFormat
from .ini import IniDocumentFormat
from .json import JsonDocumentFormat
from .yaml import IS_AVAILABLE as YAML_IS_AVAILABLE
from .yaml import YamlDocumentFormat

#: List of built-in available document file formats.
FORMATS: List[Tuple[str, Type[DocumentFormat]]] = [
    ("ini", IniDocumentFormat),
    ("json", JsonDocumentFormat),
]

if YAML_IS_AVAILABLE:
    FORMATS.append(("yaml", YamlDocumentFormat))
