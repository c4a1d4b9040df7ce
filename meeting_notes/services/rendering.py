# meeting_notes/services/rendering.py
from __future__ import annotations
import os, re, html
from typing import List, Tuple

# Branding via env (safe defaults)
BRAND_NAME          = os.getenv("BRAND_NAME", "Meeting Notes")
BRAND_PRIMARY_COLOR = os.getenv("BRAND_PRIMARY_COLOR", "#0D1A2B")
BRAND_FOOTER_TEXT   = os.getenv("BRAND_FOOTER_TEXT", f"Sent with {BRAND_NAME}")

_HEADING_RE = re.compile(r"^\s*(?:#{1,3}\s+(?P<hash>.+?)|\*\*(?P<bold>[^*]+?):?\*\*:?)\s*$")
_INLINE_BOLD = re.compile(r"\*\*(.+?)\*\*")
_INLINE_ITALIC = re.compile(r"(?<!\*)\*(?!\s)([^*\n]+?)\*(?!\*)")
_BULLET_PREFIX = re.compile(r"^\s*(?:[-•]|\*(?=\s))\s*")
_NUMBER_PREFIX = re.compile(r"^\s*\d+\.\s*")

def _split_sections(text: str) -> List[Tuple[str, str]]:
    """
    Split a summary into (heading, body) pairs.
    Headings are markdown '#' lines or whole-line bold labels like '**Action Items:**'.
    Text before the first heading is kept under an empty heading.
    """
    t = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    sections: List[Tuple[str, str]] = []
    title = ""
    buf: List[str] = []
    for line in t.split("\n"):
        m = _HEADING_RE.match(line)
        if m:
            if title or "".join(buf).strip():
                sections.append((title, "\n".join(buf).strip()))
            title = (m.group("hash") or m.group("bold")).strip().rstrip(":")
            buf = []
        else:
            buf.append(line)
    if title or "".join(buf).strip():
        sections.append((title, "\n".join(buf).strip()))
    return sections

def _inline(s: str) -> str:
    s = html.escape(s)
    s = _INLINE_BOLD.sub(r"<strong>\1</strong>", s)
    return _INLINE_ITALIC.sub(r"<em>\1</em>", s)

def _bullets_to_html(body: str) -> str:
    """
    Convert '•', '-' or '*' bullets and '1.' lists into <ul>/<ol>.
    Otherwise escape + <p>.
    """
    lines = [l.rstrip() for l in (body or "").split("\n") if l.strip() != ""]
    if not lines:
        return ""

    is_ul = all(_BULLET_PREFIX.match(l) for l in lines)
    is_ol = all(_NUMBER_PREFIX.match(l) for l in lines)

    if is_ul:
        items = "".join(f"<li>{_inline(_BULLET_PREFIX.sub('', l))}</li>" for l in lines)
        return f"<ul style='margin:0 0 12px 20px'>{items}</ul>"
    if is_ol:
        items = "".join(f"<li>{_inline(_NUMBER_PREFIX.sub('', l))}</li>" for l in lines)
        return f"<ol style='margin:0 0 12px 20px'>{items}</ol>"

    return "<p style='white-space:pre-wrap;margin:0 0 12px 0'>" + "<br>".join(_inline(l) for l in lines) + "</p>"

def _section_block(title: str, content: str) -> str:
    heading = (
        f"<h3 style='margin:0 0 8px 0;font-size:16px;color:#111'>{html.escape(title)}</h3>"
        if title else ""
    )
    return heading + _bullets_to_html(content)

def render_summary_html(text: str, *, subject: str = "") -> str:
    """Build a branded HTML email body from a markdown-ish summary."""
    blocks = "".join(_section_block(title, body) for title, body in _split_sections(text))
    heading = html.escape(subject or "Meeting Summary")
    return f"""\
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
</head>
<body style="margin:0;padding:0;background:#f6f7f9">
  <table role="presentation" cellpadding="0" cellspacing="0" width="100%" style="background:{BRAND_PRIMARY_COLOR}">
    <tr><td style="padding:16px 20px">
      <div style="font-weight:800;font-size:18px;color:#fff">{html.escape(BRAND_NAME)}</div>
    </td></tr>
  </table>
  <table role="presentation" cellpadding="0" cellspacing="0" width="100%">
    <tr><td align="center" style="padding:24px 12px">
      <table role="presentation" cellpadding="0" cellspacing="0" width="640" style="max-width:640px;background:#ffffff;border-radius:12px">
        <tr><td style="padding:24px 24px 8px 24px">
          <h2 style="margin:0 0 4px 0;font-size:20px;color:#111">{heading}</h2>
        </td></tr>
        <tr><td style="padding:8px 24px 16px 24px">
          {blocks}
        </td></tr>
      </table>
      <div style="font-size:12px;color:#6b7280;margin-top:16px">{html.escape(BRAND_FOOTER_TEXT)}</div>
    </td></tr>
  </table>
</body>
</html>
"""

def strip_markdown(text: str) -> str:
    """Drop emphasis and heading markers for plain-text mail."""
    out = []
    for line in (text or "").split("\n"):
        line = re.sub(r"^\s*#{1,6}\s+", "", line)
        line = _INLINE_BOLD.sub(r"\1", line)
        line = _INLINE_ITALIC.sub(r"\1", line)
        out.append(line)
    return "\n".join(out)
