from dataclasses import dataclass

# Decoded navigation commands handed to RowsView.handle_control.
SCROLL_DOWN = "scroll_down"
SCROLL_UP = "scroll_up"
SCROLL_PAGE_DOWN = "scroll_page_down"
SCROLL_PAGE_UP = "scroll_page_up"
SCROLL_TOP = "scroll_top"
SCROLL_BOTTOM = "scroll_bottom"

# Handled by the input layer, ignored by the view.
QUIT = "quit"
FIND = "find"


@dataclass(frozen=True)
class ScrollTo:
    line: int  # 1-based
