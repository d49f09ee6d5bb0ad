from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, Iterator

SEPARATORS: AbstractSet[str] = frozenset(" \t\n\r,-.!?[]';:/()")


def next_word_or_separator(text: str, position: int,
                           separators: AbstractSet[str] = SEPARATORS) -> str:
    """
    Runtime Complexity: O(K), where K is the length of the returned token because
    a separator at `position` is returned immediately, and otherwise the scan
    walks forward one character at a time until it reaches a separator or the
    end of `text`. Requires 0 <= position < len(text).
    """
    assert 0 <= position < len(text), "Violation of: 0 <= position < |text|"

    if text[position] in separators:
        return text[position]

    end = position
    while end < len(text) and text[end] not in separators:
        end += 1
    return text[position:end]


def tokenize_line(line: str,
                  separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
    """
    Runtime Complexity: O(L), where L is the length of the line because each call
    to next_word_or_separator consumes exactly the characters it returns, so
    every character is examined once. Joining the yielded tokens gives back
    `line` unchanged.
    """
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position, separators)
        position += len(token)
        yield token


def tokenize_words(lines: Iterable[str],
                   separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
    """
    Runtime Complexity: O(N), where N is the number of characters across all lines
    because every line is tokenized in a single pass and separator tokens are
    dropped with a constant-time set lookup. Line terminators are stripped
    before tokenizing, and words are yielded lowercased.
    """
    for line in lines:
        for token in tokenize_line(line.rstrip("\r\n"), separators):
            if token not in separators:
                yield token.lower()


def compute_word_frequencies(tokens: Iterable[str]) -> Dict[str, int]:
    """
    Runtime Complexity : O(T), where T is the number of tokens as the function iterates
    once over the input token sequence. For each token, it performs a constant-time dictionary
    lookup and update. There are no nested loops or repeated passes over the tokens.
    """
    freqs: Dict[str, int] = {}
    for tok in tokens:
        freqs[tok] = freqs.get(tok, 0) + 1
    return freqs
