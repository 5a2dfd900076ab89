"""Text lookup through the host store, with contained formatting."""

import logging

from .catalog import full_key
from .diagnostics import DiagnosticLog
from .host import HostLocalization

# Everything str.format can raise for a template/argument mismatch
FORMAT_ERRORS = (IndexError, KeyError, ValueError, AttributeError, TypeError)


class Accessor:
    """Resolves short keys to current text."""

    def __init__(self, host: HostLocalization, diagnostics: DiagnosticLog | None = None):
        self.host = host
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    def get(self, key: str) -> str:
        """Get the current text for a key.

        Whatever the host returns for an unknown key is passed through.

        Args:
            key: Short (unprefixed) key

        Returns:
            Text from the host store
        """
        return self.host.get_plain_text(full_key(key))

    def get_formatted(self, key: str, *args) -> str:
        """Get the current text for a key with positional substitution.

        If the template and arguments don't match, the unformatted text is
        returned and the failure is recorded at DEBUG.

        Args:
            key: Short (unprefixed) key
            *args: Values for {0}, {1}, ...

        Returns:
            Formatted text, or the unformatted text on mismatch

        Example:
            get_formatted('UI_ItemCount', 3) -> 'Count: 3'
        """
        text = self.get(key)
        try:
            return text.format(*args)
        except FORMAT_ERRORS as e:
            self.diagnostics.record(
                logging.DEBUG,
                "format",
                f"Failed to format localization string '{key}': {e}",
                exception=e,
                key=key,
                arg_count=len(args),
            )
            return text
