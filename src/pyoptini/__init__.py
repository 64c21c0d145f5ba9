# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 20:01:52
# @Author : Kariko Lin

import logging

from .options import (
    Options, OptionEntry, OptionINI,
    OptionsError, ParseError, ConfigNotFound, UndecodableConfig,
    MalformedSection, MissingSectionName, EmptyKeyOrValue
)

__all__ = [
    'Options', 'OptionEntry', 'OptionINI',
    'OptionsError', 'ParseError', 'ConfigNotFound', 'UndecodableConfig',
    'MalformedSection', 'MissingSectionName', 'EmptyKeyOrValue'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
