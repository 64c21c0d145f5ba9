# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 01:16:53
# @Author : Kariko Lin

from .model import Options, OptionEntry
from .errors import (
    OptionsError,
    ParseError,
    ConfigNotFound,
    UndecodableConfig,
    MalformedSection,
    MissingSectionName,
    EmptyKeyOrValue
)
from .parser import OptionINI
