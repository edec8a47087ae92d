"""Inline styles matching the target document editor's paste format."""

BASE_SPAN_STYLE = (
    "font-size:11pt;font-family:Lato;color:#212121ff;background-color:transparent;"
    "font-weight:400;font-style:normal;font-variant:normal;text-decoration:none;"
    "vertical-align:baseline;white-space:pre;white-space:pre-wrap;"
)

BOLD_SPAN_STYLE = BASE_SPAN_STYLE.replace("font-weight:400", "font-weight:700")

LINK_SPAN_STYLE = (
    "font-size:11pt;font-family:Lato;color:#000000ff;background-color:transparent;"
    "font-weight:400;font-style:normal;font-variant:normal;text-decoration:underline;"
    "-webkit-text-decoration-skip:none;text-decoration-skip-ink:none;"
    "vertical-align:baseline;white-space:pre;white-space:pre-wrap;"
)

MEMBERS_SPAN_STYLE = (
    "font-size:11pt;font-family:'Source Code Pro';color:#212121ff;"
    "background-color:rgba(0,0,0,0.059);font-weight:400;font-style:normal;"
    "font-variant:normal;text-decoration:none;vertical-align:baseline;"
    "white-space:pre;white-space:pre-wrap;"
)

ANCHOR_STYLE = "text-decoration:none;"
