"""Spreadsheet-clipboard to formatted digest conversion."""

from sheetdigest.formatting import FormatOptions, escape_html, format_row
from sheetdigest.grouping import group_rows, html_to_plain_text, render_digest
from sheetdigest.links import LinkSelection, label_source_links, select_links
from sheetdigest.members import MEMBER_MAP, join_with_and, resolve_initials
from sheetdigest.pipeline import DigestResult, run_pipeline
from sheetdigest.table_extract import Link, parse_table
from sheetdigest.titles import split_name_and_initials, split_prefix

__all__ = [
    "FormatOptions",
    "escape_html",
    "format_row",
    "group_rows",
    "html_to_plain_text",
    "render_digest",
    "LinkSelection",
    "label_source_links",
    "select_links",
    "MEMBER_MAP",
    "join_with_and",
    "resolve_initials",
    "DigestResult",
    "run_pipeline",
    "Link",
    "parse_table",
    "split_name_and_initials",
    "split_prefix",
]
