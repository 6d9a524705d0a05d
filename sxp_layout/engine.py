"""Active scheme holder and the per-trigger layout pass.

A host wires three collaborators into ``LayoutEngine``:

``get_items()``
    the live, ordered items at the start of a pass.
``get_frame()``
    the workspace rectangle ``(x, y, w, h)``.
``apply(item, x, y, w, h, flag)``
    moves one item; ``flag`` is passed through untouched.

``set_scheme(text)`` replaces the active scheme and ``run_layout_pass()``
binds, resolves and applies it.  The engine starts with no scheme, in which
case a pass places nothing.
"""

import logging

from .lexer import DEFAULT_MAX_WORD_LENGTH
from .parser import parse_with_diagnostics
from .binder import Binder
from .geometry import resolve

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """Raised when the engine is driven out of order by its host."""


def layout_pass(scheme, items, frame, apply=None, flag=0):
    """Bind *items* onto *scheme*, resolve inside *frame* and apply.

    Returns the list of placements.  Items left over after binding are
    dropped; they receive no geometry this pass.
    """
    if scheme is None:
        return []
    binder = Binder(items)
    bound = binder.bind(scheme)
    placements = resolve(bound, frame)
    logger.debug(f"Layout pass placed {len(placements)} item(s), "
                 f"dropped {len(binder.queue)}")
    if apply is not None:
        for item, rect in placements:
            apply(item, rect.x, rect.y, rect.w, rect.h, flag)
    return placements


class LayoutEngine:
    """Owns the active scheme and runs layout passes against it."""

    def __init__(self, get_items, get_frame, apply,
                 max_word_length=DEFAULT_MAX_WORD_LENGTH):
        self.get_items = get_items
        self.get_frame = get_frame
        self.apply = apply
        self.max_word_length = max_word_length
        self.warnings = []
        self._scheme = None
        self._in_pass = False

    @property
    def scheme(self):
        """Root of the active scheme, or ``None``."""
        return self._scheme

    def set_scheme(self, text):
        """Parse *text* and install it as the active scheme.

        Returns the parser warnings.  Text that yields no nodes installs an
        empty scheme.
        """
        if self._in_pass:
            raise LayoutError("Cannot replace the scheme during a layout pass")
        scheme, warnings = parse_with_diagnostics(
            text, max_word_length=self.max_word_length)
        self._scheme = scheme
        self.warnings = warnings
        logger.info(f"Installed layout scheme {text!r} ({len(warnings)} warning(s))")
        for w in warnings:
            logger.debug(f"Scheme warning: {w}")
        return warnings

    def clear_scheme(self):
        if self._in_pass:
            raise LayoutError("Cannot replace the scheme during a layout pass")
        self._scheme = None
        self.warnings = []

    def run_layout_pass(self, flag=0):
        """Run one bind, resolve and apply cycle with the active scheme."""
        if self._in_pass:
            raise LayoutError("Layout pass is already running")
        self._in_pass = True
        try:
            if self._scheme is None:
                return []
            return layout_pass(self._scheme, list(self.get_items()),
                               self.get_frame(), self.apply, flag)
        finally:
            self._in_pass = False
