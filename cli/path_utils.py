# cli/path_utils.py

import json
import os
from typing import Any


def resolve_input_path(user_input: str) -> str:
    """
    Expands `~` and relative paths into an absolute path.

    Args:
        user_input (str): The path string entered by the user.

    Returns:
        The expanded absolute path. Existence is not checked.
    """
    return os.path.abspath(os.path.expanduser(user_input.strip()))


def read_json(file_path: str) -> Any:
    """
    Opens, loads, and returns JSON data.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(file_path, "r") as f:
        return json.load(f)


def read_json_if_exists(file_path: str) -> Any | None:
    if not os.path.isfile(file_path):
        return None

    return read_json(file_path)


def write_json(file_path: str, data: Any) -> None:
    parent = os.path.dirname(file_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(file_path, "w") as f:
        json.dump(data, f, indent=2)


def sibling_path(file_path: str, filename: str) -> str:
    """
    Returns the path of `filename` in the same directory as `file_path`.
    """
    return os.path.join(os.path.dirname(file_path), filename)


def unwrap_rows(data: Any, key: str) -> Any:
    """
    Returns `data[key]` for a wrapped server response such as {"rows": [...]}, otherwise `data` unchanged.
    """
    if isinstance(data, dict) and key in data:
        return data[key]
    return data
