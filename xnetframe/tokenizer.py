"""Split a string into tokens separated by any of a set of delimiter characters."""

from __future__ import annotations

from collections.abc import Iterator


def _divide(text: str, delimiters: str) -> list[str]:
    if not delimiters:
        return [text] if text else []
    delims = set(delimiters)
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


class StringTokenizer:
    """Walks through the tokens of a string one at a time."""

    def __init__(self, text: str, delimiters: str = " ") -> None:
        self._tokens = _divide(text, delimiters)
        self._index = -1

    def next_token(self) -> str:
        """Return the next token, or an empty string once they are used up."""
        if self._index < len(self._tokens):
            self._index += 1
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return ""

    def count_tokens(self) -> int:
        """Return the total number of tokens in the string."""
        return len(self._tokens)

    def has_more_tokens(self) -> bool:
        """Tell whether :meth:`next_token` would return another token."""
        return self._index + 1 < len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        while self.has_more_tokens():
            yield self.next_token()

    def __len__(self) -> int:
        return len(self._tokens)