"""Pytest configuration and shared project documents."""

import json
from pathlib import Path

import pytest

SAMPLE_DOCUMENT = {
    "2024": [{"Project": "A", "Date": "01/03/2024"}],
    "2025": [{"Project": "B", "Date": "2025-02-10"}],
}


@pytest.fixture
def write_document(tmp_path):
    """Return a function writing a document to data.json and returning its path."""

    def write(document, name: str = "data.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return path

    return write


@pytest.fixture
def sample_path(write_document):
    return write_document(SAMPLE_DOCUMENT)


@pytest.fixture
def studio_document():
    """A document mixing date formats, tags, media and inactive records."""
    return {
        "2024": [
            {
                "Project": "Glass Choir",
                "Date": "15/06/2024",
                "Tags": "Sound, Materiality",
                "Image": "media/glass.jpg",
                "Team": "R. Ito",
            },
            {"Project": "Retired", "Date": "2024-01-01", "Active": False, "Tags": "Light"},
            {"Project": "", "Tags": "Light"},
            {"Project": "Undated One", "Tags": "XR"},
        ],
        "2025": [
            {
                "Project": "Lumen Field",
                "Date": "2025-01-01",
                "Tags": "Light,Sound",
                "Video": "media/lumen.mp4",
                "Brief": "A field of light that answers footsteps.",
            },
            {"Project": "Undated Two", "Tags": "Gestures, Puppetry"},
        ],
        "notes": "not a list",
    }
