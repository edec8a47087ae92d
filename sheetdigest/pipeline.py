from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from sheetdigest.clipboard import read_clipboard_html, write_clipboard
from sheetdigest.errors import DigestError, NoRowsError
from sheetdigest.formatting import FormatOptions
from sheetdigest.grouping import format_groups, html_to_plain_text, join_groups
from sheetdigest.links import POLICIES, POLICY_RICH
from sheetdigest.table_extract import extract_html_fragment, parse_table

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class DigestResult:
    html: str
    text: str
    n_rows: int
    n_records: int


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise DigestError(f"{name} must be a boolean (true/false), got {raw!r}")


def _env_policy(name: str = "SHEETDIGEST_POLICY", default: str = POLICY_RICH) -> str:
    v = (os.getenv(name) or "").strip().lower() or default
    if v not in POLICIES:
        raise DigestError(f"{name} must be one of {', '.join(POLICIES)}, got {v!r}")
    return v


def run_pipeline(
    markup: str,
    *,
    show_prefix: bool = True,
    policy: str = POLICY_RICH,
    with_headers: bool = False,
    base_url: Optional[str] = None,
) -> DigestResult:
    """
    HTML fragment -> rows -> grouped records -> digest.

    Raises NoRowsError when no row yields a record.
    """
    rows = parse_table(extract_html_fragment(markup), base_url=base_url)
    options = FormatOptions(show_prefix=show_prefix, policy=policy)

    groups = format_groups(rows, options)
    n_records = sum(len(records) for _, records in groups)
    if n_records == 0:
        raise NoRowsError("Could not find any valid data rows to format.")

    html = join_groups(groups, with_headers=with_headers)
    return DigestResult(html=html, text=html_to_plain_text(html), n_rows=len(rows), n_records=n_records)


def _read_input(source: Optional[str], *, use_clipboard: bool) -> str:
    if use_clipboard:
        return read_clipboard_html()
    if source is None or source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser().resolve()
    if not path.exists():
        raise DigestError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8", errors="ignore")


def _parse_args(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    import argparse

    p = argparse.ArgumentParser(
        description="Format spreadsheet rows (copied as HTML) into a one-line-per-item digest."
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", default=None, help="HTML file to read, or '-' for stdin (default)")
    src.add_argument("--clipboard", action="store_true", help="Read the HTML flavor of the clipboard")
    p.add_argument(
        "--no-prefix",
        action="store_true",
        help="Hide the bracketed [PREFIX] tag (default from SHEETDIGEST_SHOW_PREFIX, else shown)",
    )
    p.add_argument("--policy", choices=POLICIES, default=None, help="Link selection policy")
    p.add_argument("--headers", action="store_true", help="Emit a heading per category")
    p.add_argument("--base-url", default=None, help="Resolve relative link targets against this URL")
    p.add_argument("--out", default=None, help="Write the HTML digest here instead of stdout")
    p.add_argument("--copy", action="store_true", help="Copy the digest back to the clipboard")
    args = p.parse_args(argv)

    show_prefix = _env_bool("SHEETDIGEST_SHOW_PREFIX", True) and not args.no_prefix
    return {
        "source": args.input,
        "use_clipboard": bool(args.clipboard),
        "show_prefix": show_prefix,
        "policy": args.policy or _env_policy(),
        "with_headers": bool(args.headers),
        "base_url": args.base_url,
        "out_path": Path(args.out) if args.out else None,
        "copy": bool(args.copy),
    }


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = _parse_args(argv)
        markup = _read_input(cfg["source"], use_clipboard=cfg["use_clipboard"])
        print("[sheetdigest] processing...", file=sys.stderr, flush=True)
        result = run_pipeline(
            markup,
            show_prefix=cfg["show_prefix"],
            policy=cfg["policy"],
            with_headers=cfg["with_headers"],
            base_url=cfg["base_url"],
        )
        print(
            f"[sheetdigest] rows={result.n_rows} records={result.n_records}",
            file=sys.stderr,
            flush=True,
        )

        if cfg["copy"]:
            write_clipboard(result.html, result.text)
            print("[sheetdigest] copied to clipboard", file=sys.stderr, flush=True)

        out_path: Optional[Path] = cfg["out_path"]
        if out_path is not None:
            out_path = out_path.expanduser().resolve()
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(result.html, encoding="utf-8")
            print(f"[sheetdigest] wrote {out_path}", file=sys.stderr, flush=True)
        elif not cfg["copy"]:
            print(result.html, flush=True)
        return 0
    except DigestError as e:
        print(f"[sheetdigest] {e}", file=sys.stderr, flush=True)
        return 1
    except Exception as e:
        print(
            f"[sheetdigest] An unexpected error occurred during processing: {type(e).__name__}: {e}",
            file=sys.stderr,
            flush=True,
        )
        return 2


if __name__ == "__main__":
    sys.exit(main())
