"""Data models for projectgallery."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from .utils import display_year, parse_tags

FALSE_STRINGS = {"false", "no", "0", "off"}


class ProjectRecord(BaseModel):
    """A single project entry from the gallery document."""
    # Keys are read by their document spelling; lowercase variants land in extras
    model_config = ConfigDict(extra="allow")

    project: str = Field("", alias="Project")
    video: str = Field("", alias="Video")
    image: str = Field("", alias="Image")
    date: str = Field("", alias="Date")
    tags: str = Field("", alias="Tags")
    team: str = Field("", alias="Team")
    materials: str = Field("", alias="Materials")
    brief: str = Field("", alias="Brief")
    active: bool = Field(True, alias="Active")
    year: str = Field("", alias="Year")

    @model_validator(mode="before")
    @classmethod
    def _lowercase_project(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("Project") and data.get("project"):
            data = {**data, "Project": data["project"]}
        return data

    @field_validator(
        "project", "video", "image", "date", "tags", "team", "materials", "brief", "year",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        # Lists and objects are not meaningful here
        return ""

    @field_validator("active", mode="before")
    @classmethod
    def _coerce_active(cls, value: Any) -> bool:
        # Explicit null counts as inactive, absence does not
        if value is None or value is False:
            return False
        if isinstance(value, str):
            return value.strip().lower() not in FALSE_STRINGS
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value != 0
        return True

    @property
    def is_eligible(self) -> bool:
        return bool(self.project.strip()) and self.active

    @property
    def tag_list(self) -> list[str]:
        return parse_tags(self.tags)


class FilterState(BaseModel):
    """Ordered, duplicate-free list of selected tag filters."""
    selected: list[str] = Field(default_factory=list)

    def __contains__(self, tag: str) -> bool:
        return tag in self.selected

    def __len__(self) -> int:
        return len(self.selected)

    def add(self, tag: str) -> None:
        if tag not in self.selected:
            self.selected.append(tag)

    def remove(self, tag: str) -> bool:
        """Remove a tag if selected. Returns True if the state changed."""
        if tag in self.selected:
            self.selected.remove(tag)
            return True
        return False

    def toggle(self, tag: str) -> None:
        if not self.remove(tag):
            self.selected.append(tag)

    def clear(self) -> None:
        self.selected.clear()

    def matches(self, tags: list[str]) -> bool:
        """True if no filters are selected or any selected tag is present."""
        if not self.selected:
            return True
        return any(tag in tags for tag in self.selected)


MediaKind = Literal["video", "image", "none"]


class ProjectCard(BaseModel):
    """Display data for one gallery card."""
    index: int
    name: str
    media_kind: MediaKind
    media_src: str = ""
    team: str = ""
    year: str = ""
    brief: str = ""
    materials: str = ""
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, index: int, record: ProjectRecord) -> 'ProjectCard':
        video = record.video.strip()
        image = record.image.strip()
        if video:
            media_kind, media_src = "video", video
        elif image:
            media_kind, media_src = "image", image
        else:
            media_kind, media_src = "none", ""
        return cls(
            index=index,
            name=record.project,
            media_kind=media_kind,
            media_src=media_src,
            team=record.team.strip(),
            year=display_year(record.date, record.year),
            brief=record.brief,
            materials=record.materials.strip(),
            tags=record.tag_list,
        )


class RenderContext(BaseModel):
    """Result of one display pass over the master record sequence."""
    eligible: list[ProjectRecord] = Field(default_factory=list)
    visible: list[ProjectRecord] = Field(default_factory=list)

    @computed_field
    @property
    def shown_count(self) -> int:
        return len(self.visible)

    @computed_field
    @property
    def total_count(self) -> int:
        return len(self.eligible)

    @property
    def counter_text(self) -> str:
        return format_counter(self.shown_count, self.total_count)


def format_counter(shown: int, total: int) -> str:
    """Format the gallery counter line."""
    return f"Showing: {shown}/{total}"
