"""Pytest configuration and shared fixtures."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml

from sitecontent.collections import CollectionRegistry, build_registry
from sitecontent.config import ContentConfig


@pytest.fixture(autouse=True)
def reset_logging() -> Any:
    """Undo logging configuration done by CLI commands."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)


@pytest.fixture
def hero_record() -> dict[str, Any]:
    """Valid hero record."""
    return {
        "title": "Welcome",
        "subtitle": "Resilience architecture for critical systems",
        "primaryCta": {"label": "Get started", "href": "/contact"},
        "secondaryCta": {"label": "Learn more", "href": "https://example.com/about"},
        "image": "/images/hero.jpg",
    }


@pytest.fixture
def page_sections_record() -> dict[str, Any]:
    """Valid page sections record with one section of each type."""
    return {
        "sections": [
            {
                "type": "cards",
                "id": "services",
                "anchor": "services",
                "title": "Services",
                "intro": "What we offer",
                "items": [
                    {"title": "Frame", "text": "Scope the problem", "href": "/services/frame"},
                    {"title": "Steer", "text": "Ongoing support"},
                ],
            },
            {
                "type": "oneLiner",
                "id": "mission",
                "anchor": "mission",
                "title": "Mission",
                "oneLiner": "Decision-ready architecture.",
            },
            {
                "type": "ctaStrip",
                "id": "contact-strip",
                "title": "Talk to us",
                "primary": {"label": "Contact", "href": "/contact"},
            },
        ]
    }


@pytest.fixture
def seo_record() -> dict[str, Any]:
    """Valid SEO record."""
    return {
        "title": "Home",
        "description": "Independent consulting for decision-ready architecture.",
        "noIndex": False,
    }


@pytest.fixture
def registry() -> CollectionRegistry:
    """Registry with the built-in schemas."""
    return build_registry()


def write_json(path: Path, data: Any) -> Path:
    """Write data as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def write_yaml(path: Path, data: Any) -> Path:
    """Write data as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def write_entry(path: Path, data: Any) -> Path:
    """Write an entry file in the format implied by its suffix."""
    if path.suffix == ".json":
        return write_json(path, data)
    return write_yaml(path, data)


@pytest.fixture(name="write_entry")
def write_entry_fixture() -> Any:
    """Return a helper writing entry files."""
    return write_entry


@pytest.fixture
def content_root(
    tmp_path: Path,
    hero_record: dict[str, Any],
    page_sections_record: dict[str, Any],
    seo_record: dict[str, Any],
) -> Path:
    """
    Content tree with valid entries in every collection.

    content/
        hero/home.json
        hero/de/home.yaml
        pageSections/home.yaml
        seo/home.json
        seo/de/home.json
    """
    root = tmp_path / "content"
    write_json(root / "hero" / "home.json", hero_record)
    write_yaml(root / "hero" / "de" / "home.yaml", {**hero_record, "title": "Willkommen"})
    write_yaml(root / "pageSections" / "home.yaml", page_sections_record)
    write_json(root / "seo" / "home.json", seo_record)
    write_json(root / "seo" / "de" / "home.json", {**seo_record, "title": "Startseite"})
    return root


@pytest.fixture
def content_config(content_root: Path) -> ContentConfig:
    """Config pointing at the sample content tree."""
    return ContentConfig(content_root=content_root)
