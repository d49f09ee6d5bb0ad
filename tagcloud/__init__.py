"""
tagcloud/__init__.py - Tag Cloud Orchestrator

Runs one batch transform from a text file to an HTML tag cloud:
- Tokenizes the input and aggregates case-insensitive word counts
- Selects the N most frequent words
- Scales each word's font and writes the HTML document

Both files are opened once per run and closed on every exit path.
"""

import re
from typing import NamedTuple, Optional

from tagcloud.errors import (
    InputOpenError, InputReadError, InvalidWordCountError, OutputOpenError,
    TagCloudError)
from tagcloud.renderer import render_entries, render_html
from tagcloud.selector import find_top_n, max_count, sort_by_count
from tokenizer import compute_word_frequencies, tokenize_words
from utils import get_logger

_INTEGER = re.compile(r"[+-]?[0-9]+")


class RunResult(NamedTuple):
    requested_n: int
    effective_n: int
    distinct_words: int
    notice: Optional[str]


def parse_word_count(text):
    """Parse the user's N: an optional sign followed by ASCII digits only."""
    if text is None or not _INTEGER.fullmatch(text.strip()):
        raise InvalidWordCountError(
            "number of words to be included in the tag cloud "
            "must be an integer.")
    return int(text.strip())


class TagCloudGenerator(object):
    """
    Single-run tag cloud pipeline.

    The configuration supplies the separator set, the font bounds, the
    stylesheet and the input encoding.
    """

    def __init__(self, config, logger=None):
        self.config = config
        self.logger = logger or get_logger("TAGCLOUD", log_dir=config.log_dir)

    def count_words(self, lines):
        return compute_word_frequencies(
            tokenize_words(lines, self.config.separators))

    def build(self, freqs, requested_n, input_name):
        """Render the HTML for an already aggregated frequency mapping."""
        distinct = len(freqs)
        effective_n = max(0, min(requested_n, distinct))
        notice = None
        if requested_n > distinct:
            notice = (
                f"The number of tags you entered exceeds the number of "
                f"distinct words ({distinct}) in {input_name}. "
                f"The tag cloud now displays {distinct} tags.")

        selected = find_top_n(sort_by_count(freqs), requested_n)
        entries = render_entries(selected, max_count(freqs), self.config)
        html = render_html(input_name, effective_n, entries, self.config)
        return html, RunResult(requested_n, effective_n, distinct, notice)

    def generate(self, input_path, output_path, requested_n):
        self.logger.info(
            f"Generating top {requested_n} tag cloud from {input_path} "
            f"into {output_path}.")
        try:
            out = open(output_path, "w", encoding="utf-8")
        except OSError as e:
            raise OutputOpenError(
                f"cannot open output file {output_path}: {e}") from e

        with out:
            try:
                source = open(input_path, "r", encoding=self.config.encoding,
                              errors="replace")
            except OSError as e:
                raise InputOpenError(
                    f"cannot open input file {input_path}: {e}") from e

            with source:
                try:
                    freqs = self.count_words(source)
                except OSError as e:
                    raise InputReadError(
                        f"failed reading input file {input_path}: {e}") from e

            self.logger.info(f"Found {len(freqs)} distinct words in {input_path}.")
            html, result = self.build(freqs, requested_n, input_path)
            if result.notice:
                # Console output of the notice is left to the caller.
                self.logger.debug(result.notice)
            out.write(html)

        self.logger.info(
            f"Wrote {result.effective_n} tags to {output_path}.")
        return result


__all__ = [
    "RunResult",
    "TagCloudError",
    "TagCloudGenerator",
    "parse_word_count",
]
