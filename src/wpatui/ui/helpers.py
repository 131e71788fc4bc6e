"""UI helper functions for wpatui."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.widget import Widget

    from wpatui.controller import Layout


def apply_layout(network_list: Widget, help_line: Widget, layout: Layout) -> None:
    """Size the main screen widgets from a computed layout.

    Centering is left to the screen's ``align`` rule; only sizes are set here.
    The widgets are passed in rather than queried because a modal screen may
    be on top when the terminal is resized.
    """
    network_list.styles.width = layout.list_width
    network_list.styles.height = layout.list_height
    help_line.styles.width = layout.list_width
