"""Markdown rendering helpers for question prompts, explanations and reviews.

Question banks use inline code spans (`npm install`, `php artisan migrate`)
in prompts, options and explanations, so prompts are rendered as Markdown
and displayed as HTML.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line without the surrounding paragraph."""

        return self._markdown.renderInline(markdown_text.strip())

    def wrap_document(
        self,
        body_html: str,
        *,
        title: str = "TriviaQt",
        font_size: int = 14,
        text_color: str = "#111827",
        background: str = "transparent",
        code_background: str = "#E5E7EB",
    ) -> str:
        """Wrap a fragment inside a minimal HTML document."""

        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{html.escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 0.5rem; background: {background}; color: {text_color}; font-size: {font_size}pt; line-height: 1.5; }}
      code {{ background: {code_background}; border-radius: 4px; padding: 0 0.25em; }}
      .correct {{ color: #22C55E; font-weight: bold; }}
      .incorrect {{ color: #EF4444; font-weight: bold; }}
      .card {{ border-radius: 0.75rem; padding: 0.75rem 1rem; margin-bottom: 1rem; background: {code_background}; }}
      .card code {{ background: transparent; }}
    </style>
  </head>
  <body>
    {body_html}
  </body>
</html>"""


renderer = MarkdownRenderer()
