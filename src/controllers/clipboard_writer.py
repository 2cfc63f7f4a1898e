#!/usr/bin/env python3
"""Clipboard access for the generated script.

Two paths are tried in order:

1. the system clipboard through :mod:`pyperclip` (pbcopy, wl-copy, xclip,
   the Windows API, ...);
2. when that is unavailable or fails, an off-screen :class:`QPlainTextEdit`
   is filled with the text, its contents selected and the widget's own
   ``copy()`` command invoked. The holder is always disposed of afterwards.

``ClipboardWriter.copy`` never raises; it reports ``True`` only when one of
the two paths actually placed the text on the clipboard.
"""
from __future__ import annotations

import logging
from typing import Callable, Protocol

import pyperclip
from PyQt5.QtWidgets import QApplication, QPlainTextEdit

__all__ = ["ClipboardError", "TextHolder", "OffscreenTextHolder", "ClipboardWriter"]

_LOGGER = logging.getLogger("block_helper.clipboard")


class ClipboardError(RuntimeError):
    """Raised when a clipboard mechanism cannot be used at all."""


class TextHolder(Protocol):
    def populate(self, text: str) -> None: ...

    def select_all(self) -> None: ...

    def copy(self) -> bool: ...

    def dispose(self) -> None: ...


class OffscreenTextHolder:
    """Hidden editable widget used for the legacy select-and-copy path."""

    _OFFSCREEN_POS = -9999

    def __init__(self) -> None:
        app = QApplication.instance()
        if app is None:
            raise ClipboardError("No running QApplication; cannot create an off-screen text holder.")
        self._app = app
        self._edit = QPlainTextEdit()
        self._edit.move(self._OFFSCREEN_POS, self._OFFSCREEN_POS)
        self._edit.resize(1, 1)
        self._text = ""

    def populate(self, text: str) -> None:
        self._text = text
        self._edit.setPlainText(text)

    def select_all(self) -> None:
        self._edit.selectAll()

    def copy(self) -> bool:
        self._edit.copy()
        # QPlainTextEdit.copy() has no return value; check what landed.
        return self._app.clipboard().text() == self._text

    def dispose(self) -> None:
        self._edit.deleteLater()


class ClipboardWriter:
    """Copy text to the clipboard, falling back to an off-screen text holder.

    Parameters
    ----------
    primary:
        Callable writing text to the system clipboard. Defaults to
        :func:`pyperclip.copy`.
    holder_factory:
        Zero-argument callable creating a :class:`TextHolder` for the
        fallback path. Defaults to :class:`OffscreenTextHolder`.
    """

    def __init__(
        self,
        primary: Callable[[str], None] | None = None,
        holder_factory: Callable[[], TextHolder] | None = None,
    ) -> None:
        self._primary = primary if primary is not None else pyperclip.copy
        self._holder_factory = holder_factory if holder_factory is not None else OffscreenTextHolder

    def copy(self, text: str) -> bool:
        try:
            self._primary(text)
        except Exception as e:
            # pyperclip backends shell out (xclip, wl-copy, pbcopy) and can raise OSError as well
            _LOGGER.warning(f"System clipboard unavailable ({e!r}); using off-screen fallback.")
            return self._fallback_copy(text)
        _LOGGER.info(f"Copied {len(text)} characters to the system clipboard.")
        return True

    def _fallback_copy(self, text: str) -> bool:
        try:
            holder = self._holder_factory()
        except Exception as e:
            _LOGGER.error(f"Fallback copy failed: {e!r}", exc_info=True)
            return False

        try:
            holder.populate(text)
            holder.select_all()
            successful = holder.copy()
        except Exception as e:
            _LOGGER.error(f"Fallback copy failed: {e!r}", exc_info=True)
            successful = False
        finally:
            holder.dispose()

        if successful:
            _LOGGER.info(f"Copied {len(text)} characters via off-screen fallback.")
        else:
            _LOGGER.error("Fallback copy did not reach the clipboard.")
        return successful
