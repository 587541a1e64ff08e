# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from kalendar.color import HEADER_COLOR, SUB_HEADER_COLOR
from kalendar.view.state import get_show_header


def header(sub_header: Optional[str] = None, search_term: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        sub_header: Optional sub-header text to display
        search_term: Active search filter, shown when set
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    print(Padding(f"[{HEADER_COLOR}]kalendar[/{HEADER_COLOR}]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[{SUB_HEADER_COLOR}]{sub_header}[/{SUB_HEADER_COLOR}]", (0, 1)))
    if search_term is not None and search_term.strip():
        print(Padding(f"[plum1]search: {search_term.strip()}[/plum1]", (0, 1)))
