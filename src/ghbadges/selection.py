"""Mutable per-session badge selection."""

import logging
from collections.abc import Sequence

from ghbadges.catalog import DEFAULT_STYLE, FORMATS, default_format_index, get_builtin_services
from ghbadges.errors import IndexOutOfRangeError, InvalidStyleError
from ghbadges.models import BadgeStyle, FormatDefinition, ServiceDefinition

logger = logging.getLogger(__name__)


class SelectionState:
    """The choices a user has made in one session.

    Holds the repository identifier, one enabled flag per catalog service, the
    active style and the index of the active format. Derived values (resolved
    badges, snippet text) are never stored here; see
    :mod:`ghbadges.badge_generator`.
    """

    def __init__(
        self,
        services: Sequence[ServiceDefinition] | None = None,
        formats: Sequence[FormatDefinition] | None = None,
    ) -> None:
        self.services: tuple[ServiceDefinition, ...] = (
            tuple(services) if services is not None else get_builtin_services()
        )
        self.formats: tuple[FormatDefinition, ...] = (
            tuple(formats) if formats is not None else FORMATS
        )
        self._repository = ""
        self._enabled = [service.enabled_by_default for service in self.services]
        self._style = DEFAULT_STYLE
        self._format_index = default_format_index(self.formats)

    def __repr__(self) -> str:
        return (
            f"SelectionState(repository={self._repository!r}, enabled={self._enabled}, "
            f"style={self._style.value!r}, format_index={self._format_index})"
        )

    @property
    def repository(self) -> str:
        return self._repository

    @property
    def enabled_flags(self) -> tuple[bool, ...]:
        return tuple(self._enabled)

    @property
    def active_style(self) -> BadgeStyle:
        return self._style

    @property
    def active_format_index(self) -> int:
        return self._format_index

    @property
    def active_format(self) -> FormatDefinition:
        return self.formats[self._format_index]

    def set_repository(self, identifier: str) -> None:
        """Replace the repository identifier verbatim (no trimming, no validation)."""
        self._repository = identifier
        logger.debug(f"Repository set to {identifier!r}")

    def toggle_service(self, index: int) -> None:
        """Flip the enabled flag of the service at ``index``."""
        self._check_service_index(index)
        self._enabled[index] = not self._enabled[index]
        logger.debug(f"Service {self.services[index].name!r} enabled={self._enabled[index]}")

    def set_service_enabled(self, index: int, enabled: bool) -> None:
        """Set the enabled flag of the service at ``index``."""
        self._check_service_index(index)
        self._enabled[index] = enabled
        logger.debug(f"Service {self.services[index].name!r} enabled={enabled}")

    def set_style(self, style: str) -> None:
        """Select the badge style.

        Raises:
            InvalidStyleError: If ``style`` is not a known style.
        """
        try:
            self._style = BadgeStyle(style)
        except ValueError:
            valid = ", ".join(s.value for s in BadgeStyle)
            raise InvalidStyleError(f"Invalid style '{style}'. Valid: {valid}") from None
        logger.debug(f"Style set to {self._style.value!r}")

    def set_format(self, index: int) -> None:
        """Select the snippet format at ``index`` of the format catalog."""
        if not 0 <= index < len(self.formats):
            raise IndexOutOfRangeError(
                f"Format index {index} out of range [0, {len(self.formats)})"
            )
        self._format_index = index
        logger.debug(f"Format set to {self.formats[index].identifier!r}")

    def _check_service_index(self, index: int) -> None:
        if not 0 <= index < len(self._enabled):
            raise IndexOutOfRangeError(
                f"Service index {index} out of range [0, {len(self._enabled)})"
            )
