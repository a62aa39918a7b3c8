"""Interactive gallery state: filters, tag dropdown and card expansion."""

from collections.abc import Sequence

from .filtering import DEFAULT_TAG_ORDER, build_cards, build_render_context, tag_vocabulary
from .models import FilterState, ProjectCard, ProjectRecord, RenderContext

COLLAPSE_DELAY_MS = 400


class ExpansionState:
    """Tracks which card is expanded and which are mid-collapse.

    Collapsing cards hold a pending hide that completes after
    COLLAPSE_DELAY_MS; expanding a collapsing card cancels it.
    """

    def __init__(self):
        self.expanded: int | None = None
        self.collapsing: set[int] = set()

    def toggle(self, card: int) -> list[int]:
        """Toggle a card. Returns the cards that started collapsing."""
        if self.expanded == card:
            self._collapse(card)
            return [card]

        collapsed = []
        if self.expanded is not None:
            collapsed.append(self.expanded)
            self._collapse(self.expanded)
        self.collapsing.discard(card)
        self.expanded = card
        return collapsed

    def _collapse(self, card: int) -> None:
        self.collapsing.add(card)
        if self.expanded == card:
            self.expanded = None

    def finish_collapse(self, card: int) -> bool:
        """Timer callback. Returns True if the detail content should be hidden."""
        if card not in self.collapsing:
            return False
        self.collapsing.discard(card)
        return True

    def details_visible(self, card: int) -> bool:
        return card == self.expanded or card in self.collapsing

    def reset(self) -> None:
        self.expanded = None
        self.collapsing.clear()


class DropdownController:
    """Open/closed state and option list of the tag selection widget."""

    def __init__(self, filters: FilterState, tag_order: Sequence[str] = DEFAULT_TAG_ORDER):
        self.filters = filters
        self.tag_order = tuple(tag_order)
        self.is_open = False
        self.options: list[str] = []

    def open(self, eligible: Sequence[ProjectRecord]) -> list[str]:
        self.options = tag_vocabulary(eligible, self.tag_order)
        self.is_open = True
        return self.options

    def close(self) -> None:
        self.is_open = False

    def toggle_open(self, eligible: Sequence[ProjectRecord]) -> None:
        if self.is_open:
            self.close()
        else:
            self.open(eligible)

    def is_selected(self, tag: str) -> bool:
        return tag in self.filters

    @property
    def placeholder_visible(self) -> bool:
        return len(self.filters) == 0

    @property
    def chips(self) -> list[str]:
        return list(self.filters.selected)


class GalleryController:
    """Owns the master record sequence and all interactive state."""

    def __init__(
        self,
        records: Sequence[ProjectRecord],
        tag_order: Sequence[str] = DEFAULT_TAG_ORDER,
        filters: FilterState | None = None,
    ):
        self.records = tuple(records)
        self.filters = filters if filters is not None else FilterState()
        self.dropdown = DropdownController(self.filters, tag_order)
        self.expansion = ExpansionState()
        self.context = self.render()

    def render(self) -> RenderContext:
        """Recompute the visible set from the untouched master sequence."""
        self.expansion.reset()
        self.context = build_render_context(self.records, self.filters)
        return self.context

    @property
    def cards(self) -> list[ProjectCard]:
        return build_cards(self.context.visible)

    @property
    def counter_text(self) -> str:
        return self.context.counter_text

    def open_dropdown(self) -> list[str]:
        return self.dropdown.open(self.context.eligible)

    def toggle_dropdown(self) -> None:
        self.dropdown.toggle_open(self.context.eligible)

    def click_outside(self) -> None:
        self.dropdown.close()

    def toggle_tag(self, tag: str) -> RenderContext:
        self.filters.toggle(tag)
        self.dropdown.close()
        return self.render()

    def remove_tag(self, tag: str) -> RenderContext:
        if self.filters.remove(tag):
            return self.render()
        return self.context

    def toggle_card(self, card: int) -> list[int]:
        return self.expansion.toggle(card)
