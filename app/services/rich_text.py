import html
from typing import Iterable, List, Optional

from app.schemas.prismic import RichTextFragment, Span

BLOCK_TAGS = {
    "paragraph": "p",
    "preformatted": "pre",
    "heading1": "h1",
    "heading2": "h2",
    "heading3": "h3",
    "heading4": "h4",
    "heading5": "h5",
    "heading6": "h6",
}

LIST_TAGS = {
    "list-item": "ul",
    "o-list-item": "ol",
}


def render_rich_text(fragments: Iterable[RichTextFragment]) -> str:
    """
    Serialize rich-text fragments to HTML.
    Consecutive list items are grouped under a single <ul>/<ol>.
    """
    out: List[str] = []
    open_list: Optional[str] = None

    for fragment in fragments:
        list_tag = LIST_TAGS.get(fragment.type)
        if list_tag != open_list:
            if open_list:
                out.append(f"</{open_list}>")
            if list_tag:
                out.append(f"<{list_tag}>")
            open_list = list_tag

        inner = render_spans(fragment.text, fragment.spans)
        if list_tag:
            out.append(f"<li>{inner}</li>")
        else:
            tag = BLOCK_TAGS.get(fragment.type, "p")
            out.append(f"<{tag}>{inner}</{tag}>")

    if open_list:
        out.append(f"</{open_list}>")
    return "".join(out)


def render_spans(text: str, spans: Iterable[Span]) -> str:
    """Apply strong/em/hyperlink spans to text, escaping everything else."""
    opening = {}
    closing = {}
    for span in sorted(spans, key=lambda s: (s.start, -s.end)):
        start = max(0, min(span.start, len(text)))
        end = max(start, min(span.end, len(text)))
        if end == start:
            continue
        open_tag, close_tag = _span_tags(span)
        if not open_tag:
            continue
        opening.setdefault(start, []).append(open_tag)
        closing.setdefault(end, []).insert(0, close_tag)

    parts: List[str] = []
    for index in range(len(text) + 1):
        parts.extend(closing.get(index, []))
        parts.extend(opening.get(index, []))
        if index < len(text):
            char = text[index]
            parts.append("<br />" if char == "\n" else html.escape(char))
    return "".join(parts)


def _span_tags(span: Span):
    if span.type == "strong":
        return "<strong>", "</strong>"
    if span.type == "em":
        return "<em>", "</em>"
    if span.type == "hyperlink":
        url = (span.data or {}).get("url")
        if not url:
            return None, None
        target = (span.data or {}).get("target")
        target_attr = f' target="{html.escape(target)}" rel="noopener"' if target else ""
        return f'<a href="{html.escape(url)}"{target_attr}>', "</a>"
    return None, None
