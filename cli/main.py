# cli/main.py

"""
Start Menu for the attendance CLI.

Offers the two attendance workflows:
- Marking a class roster present or absent in one batch (`cli.menus.marking_menu`)
- Viewing one student's month against the branch holiday calendar (`cli.menus.calendar_menu`)

Run with `python -m cli.main` from the repository root, or the `attendance-core` script.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import calendar_menu, marking_menu

START_MENU_OPTIONS = [
    ("Mark Class Attendance", marking_menu.run),
    ("View Student Calendar", calendar_menu.run),
]


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Notes:
        - Ctrl-C or end of input at any prompt leaves the program through `exit_program()`.
        - An unsubmitted marking session is lost on exit.
    """
    title = formatters.format_banner_text("ATTENDANCE MANAGER")

    try:
        while True:
            menu_response = helpers.display_menu(
                title, START_MENU_OPTIONS, zero_option="Exit Program"
            )

            if menu_response is MenuSignal.EXIT:
                break

            menu_response()

    except (KeyboardInterrupt, EOFError):
        print()

    exit_program()


def exit_program() -> None:
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
