from __future__ import annotations

from typing import Iterable, List, NamedTuple

from bs4.dammit import EntitySubstitution

from tagcloud.selector import FrequencyEntry


class RenderEntry(NamedTuple):
    word: str
    count: int
    font_size: int


def _escape(text: str) -> str:
    return EntitySubstitution.substitute_xml(text)


def font_size(count: int, max_count: int, min_font: int, max_font: int) -> int:
    """
    Linear scale of `count` into [min_font, max_font] with truncating
    division. A count equal to `max_count` lands exactly on `max_font`.
    """
    return (count * (max_font - min_font)) // max_count + min_font


def sort_by_word(entries: Iterable[FrequencyEntry]) -> List[FrequencyEntry]:
    return sorted(entries, key=lambda e: e.word.lower())


def render_entries(selected: Iterable[FrequencyEntry], max_count: int,
                   config) -> List[RenderEntry]:
    """
    Attach a font size to each selected entry, in alphabetical display order.
    `max_count` is the highest count over every distinct word, not only the
    selected ones.
    """
    return [
        RenderEntry(e.word, e.count,
                    font_size(e.count, max_count,
                              config.min_font_size, config.max_font_size))
        for e in sort_by_word(selected)
    ]


def render_html(input_name: str, effective_n: int,
                entries: Iterable[RenderEntry], config) -> str:
    heading = f"Top {effective_n} words in {_escape(input_name)}"
    lines = [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f"<link href=\"{config.stylesheet}\" rel=\"stylesheet\" type=\"text/css\">",
        "<style type=\"text/css\"></style>",
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        "<div class=\"cdiv\">",
        "<p class=\"cbox\">",
    ]
    for entry in entries:
        lines.append(
            f"<span style=\"cursor:default\" class=\"f{entry.font_size}\" "
            f"title=\"count: {entry.count}\">{_escape(entry.word)}</span>")
    lines += [
        "</p>",
        "</div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"
