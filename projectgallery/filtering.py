"""Eligibility, tag filtering and tag vocabulary over the master record sequence."""

from collections.abc import Iterable, Sequence

from .models import FilterState, ProjectCard, ProjectRecord, RenderContext

DEFAULT_TAG_ORDER = (
    "Screens",
    "Materiality",
    "Light",
    "Optics",
    "Sound",
    "Gestures",
    "Multiplayer",
    "XR",
)


def eligible_records(records: Iterable[ProjectRecord]) -> list[ProjectRecord]:
    """Records with a project name that are not marked inactive."""
    return [r for r in records if r.is_eligible]


def filter_records(records: Iterable[ProjectRecord], filters: FilterState) -> list[ProjectRecord]:
    """Keep records sharing at least one tag with the selection (all if none selected)."""
    return [r for r in records if filters.matches(r.tag_list)]


def build_render_context(records: Sequence[ProjectRecord], filters: FilterState) -> RenderContext:
    """Compute eligible and visible subsets, preserving master order."""
    eligible = eligible_records(records)
    return RenderContext(eligible=eligible, visible=filter_records(eligible, filters))


def build_cards(records: Iterable[ProjectRecord]) -> list[ProjectCard]:
    return [ProjectCard.from_record(i, r) for i, r in enumerate(records)]


def tag_vocabulary(
    records: Iterable[ProjectRecord], tag_order: Sequence[str] = DEFAULT_TAG_ORDER
) -> list[str]:
    """Tags present in the records, restricted to and ordered by tag_order."""
    present = set()
    for record in records:
        present.update(record.tag_list)
    return [tag for tag in tag_order if tag in present]
