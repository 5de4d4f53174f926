# cli/menu_helpers.py

"""
Terminal interaction shared by the attendance menus.

This module provides utilities for:
- Numbered menus, with an optional status block redrawn above each one
- Picking one item out of a numbered list
- Free-text and yes/no prompts
- Loading JSON input files chosen by the user
- Standard navigation messages and `Response` failure output

Every prompt goes through `prompt_user_input()`, so the input marker looks the same everywhere.
"""

import json
from enum import Enum
from typing import Any, Callable, Iterable, Sequence, TypeVar

import core.formatters as formatters
from cli.path_utils import read_json, resolve_input_path
from core.response import Response

T = TypeVar("T")

_YES = {"y", "yes"}
_NO = {"n", "no"}


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === menus and lists ===


def display_menu(
    title: str,
    options: Sequence[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
    status: Callable[[], str] | None = None,
) -> MenuSignal | Callable[..., Any]:
    """
    Shows a numbered menu until the user picks a valid entry.

    Args:
        title (str): Heading printed above the options.
        options (Sequence[tuple[str, Callable[..., Any]]]): (label, action) pairs, numbered from 1.
        zero_option (str, optional): Label for entry 0. Defaults to "Return".
        status (Callable[[], str] | None, optional): Called before each redraw; its text is printed
            above the title, e.g. the running present/absent counts.

    Returns:
        MenuSignal.EXIT: If the user picks 0.
        Callable[..., Any]: The action paired with the chosen label. It is not called.
    """
    while True:
        if status is not None:
            print(f"\n{status()}")

        print(f"\n{title}")
        for number, (label, _) in enumerate(options, 1):
            print(f"{number}. {label}")
        print(f"0. {zero_option}")

        index = _parse_choice(prompt_user_input("Select an option:"), len(options))

        if index == 0:
            return MenuSignal.EXIT

        if index is not None:
            return options[index - 1][1]

        print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = str,
) -> None:
    for number, result in enumerate(results, 1):
        prefix = f"{number:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def select_from(
    items: Sequence[T],
    formatter: Callable[[T], str] = str,
    noun: str = "an item",
) -> T | None:
    """
    Lists `items` with numbers and returns the one the user picks, or None on 0.
    """
    while True:
        display_results(items, show_index=True, formatter=formatter)

        index = _parse_choice(
            prompt_user_input(f"Select {noun} (0 to cancel):"), len(items)
        )

        if index == 0:
            return None

        if index is not None:
            return items[index - 1]

        print("\nInvalid selection. Please try again.")


def _parse_choice(choice: str, count: int) -> int | None:
    # 0 is always valid; anything outside 0..count is None
    try:
        index = int(choice)
    except ValueError:
        return None

    return index if 0 <= index <= count else None


# === prompts ===


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    return prompt_user_input(prompt) or MenuSignal.CANCEL


def prompt_user_input_or_none(prompt: str) -> str | None:
    return prompt_user_input(prompt) or None


def confirm_action(prompt: str) -> bool:
    while True:
        answer = prompt_user_input(f"{prompt} (y/n)").lower()

        if answer in _YES:
            return True
        if answer in _NO:
            return False

        print("Please answer y or n.")


def prompt_json_file_or_cancel(description: str) -> tuple[str, Any] | MenuSignal:
    """
    Prompts for a JSON file path until it loads or the user cancels.

    Args:
        description (str): What the file holds, used in the prompt (e.g. "roster").

    Returns:
        tuple[str, Any]: The resolved path and the deserialized JSON data.
        MenuSignal.CANCEL: If the user leaves the input blank.
    """
    while True:
        user_input = prompt_user_input_or_cancel(
            f"Enter the path to the {description} JSON file (leave blank to cancel):"
        )

        if user_input is MenuSignal.CANCEL:
            return MenuSignal.CANCEL

        file_path = resolve_input_path(str(user_input))

        try:
            return file_path, read_json(file_path)

        except OSError as e:
            print(f"\nCould not read {file_path}: {e}. Please try again.")

        except json.JSONDecodeError as e:
            print(f"\nFailed to parse JSON data in {file_path}: {e}. Please try again.")


# === navigation messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def print_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_failure(response: Response) -> None:
    """
    Prints the error code and detail of a failed `Response`. Does nothing on success.
    """
    if response:
        return

    error_label = response.error.name if response.error is not None else "UNKNOWN"
    print(f"\n[ERROR: {error_label}] {response.detail}")
