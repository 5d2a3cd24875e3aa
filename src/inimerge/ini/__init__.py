# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/03/02 22:10:31
# @Author : Kariko Lin

from .model import IniSection, IniDocument
from .parser import IniParser, parse, readstream, dumps, load_first
from .merge import merge, merge_documents
from .convert import IniYamlParser, to_dict, from_dict, dump_yaml, load_yaml
