from html import escape
from typing import Dict

LINKS_PLACEHOLDER = "{{Shortened-urls}}"


def render_link_items(links: Dict[str, str]) -> str:
    """Render each mapping entry as an HTML list item linking to its short code."""
    items = []
    for short_code, url in links.items():
        code = escape(short_code)
        items.append(f'<li><a href="/{code}" target="_blank">{code}</a> - {escape(url)}</li>')
    return "".join(items)


def render_homepage(template_path: str, links: Dict[str, str]) -> str:
    """Fill the homepage template's placeholder with the current links."""
    with open(template_path, "r", encoding="utf-8") as f:
        template = f.read()

    return template.replace(LINKS_PLACEHOLDER, render_link_items(links))
