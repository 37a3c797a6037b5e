"""
HTML bodies for escalation e-mails.

Every body carries the thread/order subject, a deep link and a truncated,
escaped preview of the triggering content.
"""

from html import escape
from typing import Optional

from src.config.settings import Config

_LAYOUT = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{brand}</title>
    <style>
      body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #1f2937; background-color: #f3f4f6; margin: 0; }}
      .container {{ max-width: 600px; margin: 0 auto; padding: 20px; background-color: #ffffff; }}
      .header {{ padding: 20px; text-align: center; font-weight: 600; font-size: 20px; }}
      .card {{ background: #f8fafc; border-radius: 6px; padding: 12px 16px; margin: 16px 0; }}
      .card-title {{ font-weight: 600; margin: 0 0 4px 0; }}
      .button {{ display: inline-block; padding: 8px 16px; background: #2563eb; color: #ffffff; border-radius: 6px; text-decoration: none; }}
      .footer {{ padding: 20px; text-align: center; color: #6b7280; font-size: 12px; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">{brand}</div>
      <div class="content">{content}</div>
      <div class="footer">This is an automatic message from {brand}.</div>
    </div>
  </body>
</html>
"""


def truncate_preview(text: Optional[str], limit: Optional[int] = None) -> str:
    limit = limit or Config.EMAIL_PREVIEW_CHARS
    text = " ".join((text or "").split())
    if len(text) <= limit:
        return text
    return text[: max(limit - 1, 0)].rstrip() + "…"


def render_layout(content: str) -> str:
    return _LAYOUT.format(brand=escape(Config.BRAND_NAME), content=content)


def render_new_message(subject: str, link: str, preview: str) -> str:
    content = (
        "<h2>New message in thread</h2>"
        f"<p>There is a new message in the thread \"{escape(subject)}\".</p>"
        '<div class="card"><p class="card-title">Message:</p>'
        f"<p>{escape(truncate_preview(preview))}</p></div>"
        f'<p><a href="{escape(link, quote=True)}" class="button">Open the thread</a></p>'
    )
    return render_layout(content)


def render_new_thread(subject: str, link: str, preview: str, department: str) -> str:
    content = (
        "<h2>New thread</h2>"
        f"<p>A new thread \"{escape(subject)}\" was opened in the "
        f"<strong>{escape(department)}</strong> department.</p>"
        '<div class="card"><p class="card-title">First message:</p>'
        f"<p>{escape(truncate_preview(preview))}</p></div>"
        f'<p><a href="{escape(link, quote=True)}" class="button">Open the thread</a></p>'
    )
    return render_layout(content)


def render_thread_status(subject: str, link: str, is_open: bool) -> str:
    state = "open" if is_open else "closed"
    content = (
        "<h2>Thread status changed</h2>"
        f"<p>The thread \"{escape(subject)}\" is now <strong>{state}</strong>.</p>"
        f'<p><a href="{escape(link, quote=True)}" class="button">Open the thread</a></p>'
    )
    return render_layout(content)
