# topmark:header:start
#
#   project      : TermWriter
#   file         : terminal.py
#   file_relpath : src/termwriter/core/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Terminal writer fanning messages out to registered providers.

The `Terminal` is the single logical writer used by host programs. Each write
method builds a sequence of text segments, then hands it to a fan-out routine
that renders the sequence at most once per color capability (colored and/or
plain) and delivers the matching rendering to every registered provider.

Notes:
    * Provider exceptions are not caught: they propagate to the caller of the
      write method and abort delivery to the remaining providers.
    * The registration set is owned by each `Terminal` instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termwriter.config.logging import get_logger
from termwriter.constants import EOL
from termwriter.core.colors import Color, ColorableSequence, with_foreground
from termwriter.core.provider import Severity
from termwriter.core.serializer import serialize_segments

if TYPE_CHECKING:
    from collections.abc import Sequence

    from termwriter.config.logging import TermwriterLogger
    from termwriter.core.colors import TextSegment
    from termwriter.core.provider import TerminalProvider


logger: TermwriterLogger = get_logger(__name__)


def _force_foreground(parts: Sequence[TextSegment], color: Color) -> list[TextSegment]:
    """Return copies of `parts` with their foreground overwritten by `color`."""
    return [with_foreground(part, color) for part in parts]


def _eol() -> ColorableSequence:
    """Return an uncolored line-ending segment."""
    return ColorableSequence(text=EOL)


class Terminal:
    """Writes text segments to a set of terminal providers.

    Args:
        provider (TerminalProvider): The initial provider to register.
        verbose_enabled (bool): Whether `write_verbose*` output is delivered.

    Attributes:
        verbose_enabled (bool): Verbose gate; may be changed by the owner at any time.
    """

    verbose_enabled: bool

    def __init__(self, provider: TerminalProvider, verbose_enabled: bool = False) -> None:
        # Keyed by id() so registration is by identity, and unhashable providers work.
        self._providers: dict[int, TerminalProvider] = {}
        self.register_provider(provider)
        self.verbose_enabled = verbose_enabled

    @property
    def providers(self) -> tuple[TerminalProvider, ...]:
        """Snapshot of the currently registered providers."""
        return tuple(self._providers.values())

    def register_provider(self, provider: TerminalProvider) -> None:
        """Register a provider. Registering the same object twice is a no-op."""
        key: int = id(provider)
        if key in self._providers:
            logger.trace("Provider already registered: %r", provider)
            return
        self._providers[key] = provider
        logger.trace(
            "Registered provider %r (supports_color=%s)", provider, provider.supports_color
        )

    def unregister_provider(self, provider: TerminalProvider) -> None:
        """Unregister a provider. Unknown providers are ignored."""
        if self._providers.pop(id(provider), None) is not None:
            logger.trace("Unregistered provider %r", provider)

    # --- Message operations ---

    def write(self, *message_parts: TextSegment) -> None:
        """Write a generic message to the terminal.

        A line ending is appended after the message parts.
        """
        self._write_segments_to_providers([*message_parts, _eol()], Severity.LOG)

    def write_line(self, *message_parts: TextSegment) -> None:
        """Write a generic message to the terminal, followed by a newline.

        Delegates to `write`, so the output ends with two line endings.
        """
        self.write(*message_parts, _eol())

    def write_warning(self, *message_parts: TextSegment) -> None:
        """Write a warning message with yellow text."""
        self._write_segments_to_providers(
            _force_foreground(message_parts, Color.YELLOW),
            Severity.WARN,
        )

    def write_warning_line(self, *message_parts: TextSegment) -> None:
        """Write a warning message with yellow text, followed by a newline."""
        self._write_segments_to_providers(
            [*_force_foreground(message_parts, Color.YELLOW), _eol()],
            Severity.WARN,
        )

    def write_error(self, *message_parts: TextSegment) -> None:
        """Write an error message with red text.

        Errors are routed with `Severity.WARN`.
        """
        self._write_segments_to_providers(
            _force_foreground(message_parts, Color.RED),
            Severity.WARN,
        )

    def write_error_line(self, *message_parts: TextSegment) -> None:
        """Write an error message with red text, followed by a newline.

        Errors are routed with `Severity.WARN`.
        """
        self._write_segments_to_providers(
            [*_force_foreground(message_parts, Color.RED), _eol()],
            Severity.WARN,
        )

    def write_verbose(self, *message_parts: TextSegment) -> None:
        """Write a verbose-level message. Only delivered if verbose output is enabled."""
        if self.verbose_enabled:
            self._write_segments_to_providers(list(message_parts), Severity.LOG)

    def write_verbose_line(self, *message_parts: TextSegment) -> None:
        """Write a verbose-level message followed by a newline.

        Only delivered if verbose output is enabled.
        """
        self.write_verbose(*message_parts, _eol())

    # --- Fan-out ---

    def _write_segments_to_providers(
        self,
        segments: Sequence[TextSegment],
        severity: Severity,
    ) -> None:
        """Render `segments` once per color capability and deliver to every provider.

        Args:
            segments (Sequence[TextSegment]): The segments making up the message.
            severity (Severity): Routing classification passed to each provider.
        """
        with_color: str | None = None
        without_color: str | None = None

        # Iterate over a snapshot: a provider may (un)register during its own write.
        for provider in tuple(self._providers.values()):
            if provider.supports_color:
                if with_color is None:
                    with_color = serialize_segments(segments, with_color=True)
                text: str = with_color
            else:
                if without_color is None:
                    without_color = serialize_segments(segments, with_color=False)
                text = without_color
            provider.write(text, severity)

        logger.trace(
            "Delivered %d segment(s) as %s to %d provider(s) (colored=%s, plain=%s)",
            len(segments),
            severity.value,
            len(self._providers),
            with_color is not None,
            without_color is not None,
        )
