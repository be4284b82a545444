"""Temporarily mask regions of text.

Typical use is hiding comments or nowiki spans while the rest of the text is
rewritten::

    u = Unbinder("Hello world <!-- world --> world")
    u.unbind("<!--", "-->")
    u.text = u.text.replace("world", "earth")
    u.rebind()  # 'Hello earth <!-- world --> earth'
"""

from __future__ import annotations

import re
import uuid


class Unbinder:
    """Text holder that can swap regions for placeholders and back.

    Attributes:
        text: Current text, with placeholders while regions are unbound.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._placeholder_prefix = f"%UNIQ::{uuid.uuid4().hex}::"
        self._placeholder_suffix = "::UNIQ%"
        self._counter = 0
        self._history: dict[str, str] = {}

    def unbind(self, prefix: str, postfix: str) -> None:
        """Replace every prefix...postfix region with a unique placeholder.

        Can be called repeatedly; a later call may swallow placeholders
        from an earlier one.

        Args:
            prefix: Regex source for the start of a region.
            postfix: Regex source for the end of a region.
        """
        pattern = re.compile(prefix + r"([\s\S]*?)" + postfix)

        def _replace(match: re.Match[str]) -> str:
            placeholder = f"{self._placeholder_prefix}{self._counter}{self._placeholder_suffix}"
            self._history[placeholder] = match.group(0)
            self._counter += 1
            return placeholder

        self.text = pattern.sub(_replace, self.text)

    def rebind(self) -> str:
        """Restore every unbound region and return the text.

        Placeholders are restored newest first, so regions that contain
        placeholders of earlier unbind() calls come back intact.
        """
        content = self.text
        for placeholder, original in reversed(self._history.items()):
            content = content.replace(placeholder, original, 1)
        self.text = content
        self._history.clear()
        return self.text

    def get_text(self) -> str:
        return self.text
