#
# Copyright (C) 2021 Adam Meily
#
# This file is subject to the terms and conditions defined in the file 'LICENSE', which is part of
# this source code package.
#
"""
inidoc Public API
"""
# ruff: noqa: F401
from .codec import (
    IniSyntaxError,
    dumps,
    loads,
    parse,
    parse_file,
    parse_into,
    serialize,
    serialize_file,
)
from .document import Document, DocumentFormat, new_document
from .options import OptionSet
from .streams import IReader, IWriter
from .version import __version__
