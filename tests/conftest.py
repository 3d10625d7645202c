"""Pytest fixtures for ghbadges tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from ghbadges.models import FormatDefinition, ServiceDefinition
from ghbadges.selection import SelectionState


@pytest.fixture(autouse=True)
def user_config_path(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the user config at a temporary file so tests never read ~/.config."""
    config_path = tmp_path / "config" / "config.yaml"
    with (
        patch("ghbadges.user_config.get_config_path", return_value=config_path),
        patch("ghbadges.cli.get_config_path", return_value=config_path),
    ):
        yield config_path


@pytest.fixture
def build_service() -> ServiceDefinition:
    """A single CI service using only the repository placeholder."""
    return ServiceDefinition(
        name="build",
        title="Build Status",
        link_url_template="https://ci.example/{repository}",
        image_url_template="https://ci.example/{repository}/badge",
        enabled_by_default=True,
    )


@pytest.fixture
def link_format() -> FormatDefinition:
    """A format rendering a plain markdown link."""
    return FormatDefinition(
        identifier="link",
        label="Link",
        template="[{{ title }}]({{ link_url }})",
        is_default=True,
    )


@pytest.fixture
def sample_services() -> tuple[ServiceDefinition, ...]:
    """Three services, the first and last enabled by default."""
    return (
        ServiceDefinition(
            name="alpha",
            title="Alpha",
            link_url_template="https://alpha.example/{repository}",
            image_url_template="https://alpha.example/{repository}/{branch}.svg",
            enabled_by_default=True,
        ),
        ServiceDefinition(
            name="beta",
            title="Beta",
            link_url_template="https://beta.example/{repository}",
            image_url_template="https://beta.example/{repository}.svg",
        ),
        ServiceDefinition(
            name="gamma",
            title="Gamma",
            link_url_template="https://gamma.example/",
            image_url_template="https://gamma.example/badge.svg?label=gamma",
            enabled_by_default=True,
        ),
    )


@pytest.fixture
def sample_selection(sample_services: tuple[ServiceDefinition, ...]) -> SelectionState:
    """A selection over the three sample services and the built-in formats."""
    return SelectionState(sample_services)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """A custom catalog YAML file with a single service."""
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "services:\n"
        "  - name: build\n"
        "    title: Build Status\n"
        "    link_url_template: https://ci.example/{repository}\n"
        "    image_url_template: https://ci.example/{repository}/badge\n"
        "    enabled_by_default: true\n"
    )
    return path
