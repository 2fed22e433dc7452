import json
from typing import Any, Dict, Union

from ..protocol.errors import MalformedJSONError


def json_dumps(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def json_loads(s: Union[str, bytes, bytearray]) -> Any:
    return json.loads(s)


def load_json_object(data: Union[str, bytes, bytearray, Dict[str, Any]]) -> Dict[str, Any]:
    """
    Parse signature JSON into a dict.

    Already-parsed dicts are passed through so that a signature nested inside
    a larger JSON document can be decoded without re-serializing it.
    """
    if isinstance(data, dict):
        return data
    try:
        obj = json_loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise MalformedJSONError(str(e)) from e
    if not isinstance(obj, dict):
        raise MalformedJSONError(f"expected a JSON object, got {type(obj).__name__}")
    return obj
