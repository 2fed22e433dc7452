from .json import json_dumps, json_loads, load_json_object
from .logging import get_logger

__all__ = ["json_dumps", "json_loads", "load_json_object", "get_logger"]
