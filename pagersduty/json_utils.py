import json
from typing import Any

from pagersduty.errors import MalformedResourceError

JSON_COMPACT_SEPARATORS = (",", ":")


def json_dumps(
    data: Any,
    *,
    compact: bool = False,
    indent: int | None = None,
    sort_keys: bool = False,
) -> str:
    """Serialize data to a JSON formatted string.

    Key order is preserved unless sort_keys is set, so encoded resources keep
    their envelope-first layout.

    Args:
        data: The data to serialize.
        compact: If True, use compact separators (no spaces).
        indent: If specified, pretty-print with this many spaces of indentation.
        sort_keys: Sort object keys.

    Returns:
        JSON formatted string.
    """
    separators = JSON_COMPACT_SEPARATORS if compact else None
    return json.dumps(data, indent=indent, separators=separators, sort_keys=sort_keys)


def json_loads(data: str | bytes) -> Any:
    """Deserialize a JSON document.

    Args:
        data: JSON formatted string or bytes.

    Returns:
        Python object (dict, list, str, int, float, bool, or None).

    Raises:
        MalformedResourceError: If data is not valid JSON.
    """
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise MalformedResourceError(f"invalid JSON: {e}") from e
