"""Textual playground for trying scroll alignments on nested containers."""

from typing import List

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from .config import Config, ScrollConfigError, ScrollOptions
from .models import Alignment, ScrollAction, ScrollMode
from .textual_layout import scroll_into_view

ALIGNMENTS = [Alignment.NEAREST, Alignment.START, Alignment.CENTER, Alignment.END]


class Item(Static):
    """A selectable row inside the inner scroll container."""

    def __init__(self, index: int, *args, **kwargs):
        text = f"Item {index:02d}"
        if index % 5 == 4:
            # Wide rows give the inner container something to scroll sideways
            text += " " + "-" * 90 + " wide"
        super().__init__(text, *args, **kwargs)
        self.index = index


class StatusBar(Static):
    """Status bar showing the active options and the last computed actions."""

    options_text = reactive("")
    actions_text = reactive("")

    def render(self) -> str:
        """Render the status bar."""
        parts = [self.options_text] if self.options_text else []
        parts.append(self.actions_text or "Press j/k to move between items")
        return " | ".join(parts)


class ScrollPlaygroundApp(App):
    """Reveal items inside nested scroll containers using computed scroll actions."""

    CSS = """
    #outer {
        height: 1fr;
        border: round $accent;
    }

    .filler {
        height: 6;
        color: $text-muted;
        padding: 1 2;
    }

    #inner {
        height: 12;
        border: heavy $primary;
        padding: 0 1;
        overflow-x: auto;
    }

    Item {
        width: auto;
    }

    Item.-selected {
        background: $accent;
        color: $text;
    }

    StatusBar {
        dock: bottom;
        height: 1;
        background: $boost;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("j,down", "move(1)", "Next item"),
        Binding("k,up", "move(-1)", "Previous item"),
        Binding("b", "cycle_block", "Block align"),
        Binding("i", "cycle_inline", "Inline align"),
        Binding("m", "toggle_mode", "Scroll mode"),
    ]

    selected = reactive(0, init=False)

    def __init__(self, item_count: int = 40, options: ScrollOptions | None = None):
        super().__init__()
        self.item_count = item_count
        self.options = options or Config.default().to_options()
        self.last_actions: List[ScrollAction] = []

    def compose(self) -> ComposeResult:
        """Create the nested scroll layout."""
        yield Header()
        with ScrollableContainer(id="outer"):
            yield Static("Outer container content above the list", classes="filler")
            with ScrollableContainer(id="inner"):
                for index in range(self.item_count):
                    yield Item(index, id=f"item-{index}")
            for _ in range(4):
                yield Static("Outer container content below the list", classes="filler")
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        """Highlight the first item once the layout exists."""
        self._update_status_bar()
        self.call_after_refresh(self._reveal_selected)

    def watch_selected(self, old_value: int, new_value: int) -> None:
        """Move the highlight and reveal the newly selected item."""
        self.query_one(f"#item-{old_value}", Item).remove_class("-selected")
        self._reveal_selected()

    def _reveal_selected(self) -> None:
        item = self.query_one(f"#item-{self.selected}", Item)
        item.add_class("-selected")
        self.last_actions = scroll_into_view(item, options=self.options)
        self._update_status_bar()

    def _update_status_bar(self) -> None:
        status = self.query_one(StatusBar)
        opts = self.options
        status.options_text = (
            f"block={opts.block.value} inline={opts.inline.value} mode={opts.scroll_mode.value}"
        )
        if self.last_actions:
            status.actions_text = ", ".join(
                f"#{action.container.id or type(action.container).__name__}"
                f" → ({action.left:g}, {action.top:g})"
                for action in self.last_actions
            )
        else:
            status.actions_text = "no scrolling needed"

    def _set_options(self, **changes) -> None:
        try:
            self.options = ScrollOptions.resolve(self.options, **changes)
        except ScrollConfigError as e:
            self.notify(str(e), severity="error")
            return
        self._reveal_selected()

    def action_move(self, step: int) -> None:
        """Select the next or previous item."""
        self.selected = (self.selected + step) % self.item_count

    def action_cycle_block(self) -> None:
        """Switch to the next block alignment."""
        position = ALIGNMENTS.index(self.options.block)
        self._set_options(block=ALIGNMENTS[(position + 1) % len(ALIGNMENTS)])

    def action_cycle_inline(self) -> None:
        """Switch to the next inline alignment."""
        position = ALIGNMENTS.index(self.options.inline)
        self._set_options(inline=ALIGNMENTS[(position + 1) % len(ALIGNMENTS)])

    def action_toggle_mode(self) -> None:
        """Toggle between always and if-needed."""
        if self.options.scroll_mode is ScrollMode.ALWAYS:
            self._set_options(scroll_mode=ScrollMode.IF_NEEDED)
        else:
            self._set_options(scroll_mode=ScrollMode.ALWAYS)
