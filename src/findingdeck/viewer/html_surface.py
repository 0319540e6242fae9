"""Single-page HTML rendering surface.

Each tab owns a panel of HTML. ``render_page`` wraps the panels in a
self-contained page with numbered tab buttons and a small script that
switches the visible panel.
"""

from collections.abc import Iterable

from jinja2 import Environment
from markupsafe import Markup

from findingdeck.config.defaults import (
    DEFAULT_SECTION_ALIASES,
    PENDING_MESSAGE,
    SEVERITY_DISPLAY,
)
from findingdeck.lib.code_tokenizer import highlight_html
from findingdeck.lib.fragment_formatter import render_inline
from findingdeck.models.record import (
    SECTION_ORDER,
    AnyFragment,
    CodeBlock,
    OrderedList,
    Paragraph,
    StructuredRecord,
    UnorderedList,
)

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

RECORD_TEMPLATE = _env.from_string(
    """\
<h2 class="record-title">Hallazgo {{ record.ordinal }}: {{ record.title }}</h2>
{% for section in sections %}
<section class="record-section section-{{ section.label }}">
  <h3>{{ section.heading }}
  {% if section.severity %}
    <span class="badge badge-{{ section.severity.value }}">
      {{- section.severity_text -}}
    </span>
  {% endif %}
  </h3>
  {% if section.concern %}
  <p class="principal-concern">{{ section.concern }}</p>
  {% endif %}
  {{ section.body }}
</section>
{% endfor %}
"""
)

PAGE_TEMPLATE = _env.from_string(
    """\
<!DOCTYPE html>
<html lang="es">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
  body { font-family: system-ui, sans-serif; margin: 0 auto; max-width: 60rem; }
  .tabs { display: flex; flex-wrap: wrap; gap: .25rem; padding: 1rem 0; }
  .tab { border: 1px solid #ccc; background: #f6f6f6; padding: .4rem .8rem; }
  .tab.active { background: #fff; border-bottom-color: #fff; font-weight: bold; }
  .panel[hidden] { display: none; }
  .notice { color: #666; font-style: italic; }
  .badge { border-radius: .3rem; color: #fff; font-size: .8rem; padding: .1rem .4rem; }
  .badge-high { background: #c0392b; }
  .badge-medium { background: #d68910; }
  .badge-low { background: #27ae60; }
  .file-path { color: #555; font-family: monospace; }
  pre { background: #1e1e1e; color: #ddd; overflow-x: auto; padding: 1rem; }
  .tok-keyword { color: #569cd6; }
  .tok-type { color: #4ec9b0; }
  .tok-string { color: #ce9178; }
  .tok-comment { color: #6a9955; }
  .tok-number { color: #b5cea8; }
</style>
</head>
<body>
<h1>{{ title }}</h1>
<nav class="tabs">
{% for ordinal in tabs %}
  <button class="tab{% if ordinal == active %} active{% endif %}"
          data-tab="{{ ordinal }}">{{ ordinal }}</button>
{% endfor %}
</nav>
{% for ordinal in tabs %}
<div class="panel" id="tab-{{ ordinal }}"{% if ordinal != active %} hidden{% endif %}>
{{ panels[ordinal] }}
</div>
{% endfor %}
<script>
document.querySelectorAll(".tab").forEach(function (button) {
  button.addEventListener("click", function () {
    document.querySelectorAll(".tab").forEach(function (b) {
      b.classList.remove("active");
    });
    document.querySelectorAll(".panel").forEach(function (p) { p.hidden = true; });
    button.classList.add("active");
    document.getElementById("tab-" + button.dataset.tab).hidden = false;
  });
});
</script>
</body>
</html>
"""
)


def _notice(message: str) -> Markup:
    return Markup('<p class="notice">{}</p>').format(message)


def fragment_to_html(fragment: AnyFragment) -> Markup:
    """Render one fragment as HTML.

    List items are already display-ready; paragraph text is escaped here.
    """
    if isinstance(fragment, CodeBlock):
        path = ""
        if fragment.file_path:
            path = Markup('<div class="file-path">{}</div>').format(fragment.file_path)
        code = Markup(
            '<pre><code class="language-{}">{}</code></pre>'
        ).format(fragment.language, Markup(highlight_html(fragment.source)))
        return Markup(path) + code
    if isinstance(fragment, OrderedList | UnorderedList):
        tag = "ol" if isinstance(fragment, OrderedList) else "ul"
        items = "".join(f"<li>{item}</li>" for item in fragment.items)
        return Markup(f"<{tag}>{items}</{tag}>")
    if isinstance(fragment, Paragraph):
        blocks = [b.strip() for b in fragment.text.split("\n\n") if b.strip()]
        return Markup(
            "".join(
                "<p>" + render_inline(block).replace("\n", "<br>\n") + "</p>"
                for block in blocks
            )
        )
    return Markup("")


def record_to_html(record: StructuredRecord) -> Markup:
    """Render a record's sections in display order."""
    sections = []
    for label in SECTION_ORDER:
        fragment = record.get(label)
        if fragment is None:
            continue
        sections.append(
            {
                "label": label.value,
                "heading": DEFAULT_SECTION_ALIASES[label][0],
                "severity": fragment.severity,
                "severity_text": SEVERITY_DISPLAY.get(fragment.severity)
                if fragment.severity
                else "",
                "concern": fragment.principal_concern,
                "body": fragment_to_html(fragment),
            }
        )
    return Markup(RECORD_TEMPLATE.render(record=record, sections=sections))


class HtmlSurface:
    """Collect per-tab HTML panels for a single static page.

    Attributes:
        tabs: Declared tab ordinals
        active: Currently visible tab, or None before activation
        panels: HTML content per tab
    """

    def __init__(self, tabs: Iterable[int]) -> None:
        """Create an empty panel for every declared tab."""
        self.tabs: tuple[int, ...] = tuple(tabs)
        self.active: int | None = None
        self.panels: dict[int, Markup] = {ordinal: Markup("") for ordinal in self.tabs}

    def activate(self, ordinal: int) -> None:
        self.active = ordinal

    def deactivate(self, ordinal: int) -> None:
        if self.active == ordinal:
            self.active = None

    def show_pending(self, ordinal: int) -> None:
        self.panels[ordinal] = _notice(PENDING_MESSAGE)

    def show_message(self, ordinal: int, message: str) -> None:
        self.panels[ordinal] = _notice(message)

    def render(self, ordinal: int, record: StructuredRecord) -> None:
        self.panels[ordinal] = record_to_html(record)

    def render_page(self, title: str) -> str:
        """Return the complete HTML document."""
        return PAGE_TEMPLATE.render(
            title=title, tabs=self.tabs, active=self.active, panels=self.panels
        )
