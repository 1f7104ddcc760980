"""Utility helpers for globalkit."""

from .dispatch import MainThreadDispatcher, sync_on_main
from .io import (
    documents_dir,
    ensure_parent_dir,
    load,
    load_collection,
    save,
    save_collection,
    to_dict_representation,
    to_list_representation,
)
from .log import do_catch_log, get_logger
from .rand import random_below, random_between
from .text import ltrim, rtrim, trim
from .timing import absolute_time, elapsed_time, measure
from .uid import create_uid

__all__ = [
    "MainThreadDispatcher",
    "sync_on_main",
    "documents_dir",
    "ensure_parent_dir",
    "load",
    "load_collection",
    "save",
    "save_collection",
    "to_dict_representation",
    "to_list_representation",
    "do_catch_log",
    "get_logger",
    "random_below",
    "random_between",
    "ltrim",
    "rtrim",
    "trim",
    "absolute_time",
    "elapsed_time",
    "measure",
    "create_uid",
]
