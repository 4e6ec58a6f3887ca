"""Shared HTML shell for transactional emails."""

from html import escape


def paragraphs_html(text: str) -> str:
    return "".join(f"<p>{escape(block).replace(chr(10), '<br>')}</p>" for block in text.split("\n\n") if block)


def button_html(url: str, label: str) -> str:
    return (
        f'<p><a href="{escape(url, quote=True)}" '
        'style="display:inline-block;padding:12px 24px;background:#111;color:#fff;text-decoration:none;">'
        f"{escape(label)}</a></p>"
    )


def wrap_html(title: str, inner: str) -> str:
    return (
        "<!DOCTYPE html><html><body style=\"font-family:Helvetica,Arial,sans-serif;color:#222;\">"
        f'<div style="max-width:600px;margin:0 auto;padding:24px;"><h1 style="font-weight:300;">{escape(title)}</h1>'
        f"{inner}</div></body></html>"
    )
