"""Badge composition: resolve selected services and render snippets."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ghbadges.template_engine import DEFAULT_BRANCH, apply_style, resolve_template

if TYPE_CHECKING:
    from ghbadges.models import FormatDefinition, ServiceDefinition
    from ghbadges.selection import SelectionState


@dataclass(frozen=True)
class ResolvedBadge:
    """A badge with concrete link and image URLs."""

    title: str
    link_url: str
    image_url: str


def resolve_service(service: ServiceDefinition, repository: str, style: str) -> ResolvedBadge:
    """Resolve a service's URL templates for a repository and style."""
    return ResolvedBadge(
        title=service.title,
        link_url=resolve_template(service.link_url_template, repository, DEFAULT_BRANCH),
        image_url=apply_style(
            resolve_template(service.image_url_template, repository, DEFAULT_BRANCH), style
        ),
    )


def compose_enabled(selection: SelectionState) -> list[ResolvedBadge]:
    """Resolve every enabled service of a selection.

    The result follows catalog order and is recomputed on every call. An
    empty list means there is nothing to preview or render.

    Args:
        selection: The current session selection.

    Returns:
        One ResolvedBadge per enabled service.
    """
    return [
        resolve_service(service, selection.repository, selection.active_style)
        for service, enabled in zip(selection.services, selection.enabled_flags, strict=True)
        if enabled
    ]


def render_snippet(badges: Sequence[ResolvedBadge], fmt: FormatDefinition) -> str:
    """Render badges in a snippet format, one newline-terminated entry per badge."""
    return "".join(f"{fmt.render(b.title, b.link_url, b.image_url)}\n" for b in badges)


def should_preview(selection: SelectionState) -> bool:
    """Whether a selection has anything worth previewing.

    Requires a non-empty repository identifier and at least one enabled service.
    """
    return bool(selection.repository) and bool(compose_enabled(selection))
