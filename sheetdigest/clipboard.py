"""
Clipboard access for the "HTML Format" flavor (Windows, via pywin32).

Reads one clipboard snapshot, and writes the digest back as both HTML and
plain text.

Dependencies:
  pip install pywin32   (Windows only)
"""
from __future__ import annotations

from sheetdigest.errors import (
    ClipboardReadError,
    ClipboardUnavailableError,
    ClipboardWriteError,
    DigestError,
)
from sheetdigest.table_extract import END_FRAGMENT, START_FRAGMENT, extract_html_fragment

CF_HTML_NAME = "HTML Format"

_CF_HTML_HEADER = (
    "Version:0.9\r\n"
    "StartHTML:{start_html:010d}\r\n"
    "EndHTML:{end_html:010d}\r\n"
    "StartFragment:{start_fragment:010d}\r\n"
    "EndFragment:{end_fragment:010d}\r\n"
)


def _win32():
    try:
        import win32clipboard
        import win32con
    except ImportError as e:
        raise ClipboardUnavailableError(
            "Clipboard access needs pywin32 on Windows. "
            "Use --input to read a saved HTML fragment instead."
        ) from e
    return win32clipboard, win32con


def build_cf_html(fragment: str) -> bytes:
    """
    Wrap an HTML fragment in the CF_HTML envelope.

    Offsets are byte offsets into the UTF-8 payload, header included.
    """
    prefix = f"<html><body>{START_FRAGMENT}"
    suffix = f"{END_FRAGMENT}</body></html>"
    placeholder = _CF_HTML_HEADER.format(
        start_html=0, end_html=0, start_fragment=0, end_fragment=0
    )
    header_len = len(placeholder.encode("utf-8"))
    frag_bytes = fragment.encode("utf-8")

    start_html = header_len
    start_fragment = start_html + len(prefix.encode("utf-8"))
    end_fragment = start_fragment + len(frag_bytes)
    end_html = end_fragment + len(suffix.encode("utf-8"))

    header = _CF_HTML_HEADER.format(
        start_html=start_html,
        end_html=end_html,
        start_fragment=start_fragment,
        end_fragment=end_fragment,
    )
    return header.encode("utf-8") + prefix.encode("utf-8") + frag_bytes + suffix.encode("utf-8")


def read_clipboard_html() -> str:
    """
    Return the HTML fragment currently on the clipboard.

    Raises ClipboardUnavailableError when there is no backend or no HTML
    flavor, ClipboardReadError when the read itself fails.
    """
    win32clipboard, _ = _win32()
    try:
        win32clipboard.OpenClipboard()
    except Exception as e:
        raise ClipboardReadError(f"Could not open clipboard: {e}") from e
    try:
        fmt = win32clipboard.RegisterClipboardFormat(CF_HTML_NAME)
        if not win32clipboard.IsClipboardFormatAvailable(fmt):
            raise ClipboardUnavailableError("No HTML content found on the clipboard.")
        data = win32clipboard.GetClipboardData(fmt)
    except DigestError:
        raise
    except Exception as e:
        raise ClipboardReadError(f"Could not read from clipboard: {e}") from e
    finally:
        win32clipboard.CloseClipboard()

    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="ignore")
    return extract_html_fragment(data)


def write_clipboard(html: str, text: str) -> None:
    """Replace the clipboard contents with the HTML and plain-text flavors."""
    win32clipboard, win32con = _win32()
    try:
        win32clipboard.OpenClipboard()
    except Exception as e:
        raise ClipboardWriteError(f"Could not open clipboard: {e}") from e
    try:
        win32clipboard.EmptyClipboard()
        fmt = win32clipboard.RegisterClipboardFormat(CF_HTML_NAME)
        win32clipboard.SetClipboardData(fmt, build_cf_html(html))
        win32clipboard.SetClipboardData(win32con.CF_UNICODETEXT, text)
    except Exception as e:
        raise ClipboardWriteError(f"Could not write to clipboard: {e}") from e
    finally:
        win32clipboard.CloseClipboard()
