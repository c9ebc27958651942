"""Legal form matching over whitespace-separated company names."""

from typing import Iterable, Iterator, Optional

from ..utils.text import clean, tokenize

# StripMiddle rejects legal forms shorter than this (counted in characters)
MIN_LEGAL_FORM_LENGTH = 2


class _Node:
    """Node of a trie over reversed legal form phrases."""

    __slots__ = ("children", "terminal")

    def __init__(self):
        self.children: dict[str, "_Node"] = {}
        self.terminal = False


class LegalForms:
    """
    Read-only set of cleaned legal form phrases and the matcher that finds
    them inside a company name.

    A legal form is recognized by scanning the cleaned tokens from right to
    left, growing a window that always reaches the right edge. Every time the
    concatenation of the window is a known phrase the legal form span grows to
    cover it, so the longest known suffix wins ("GmbH & Co. KG" as "gmbhcokg"
    over "kg"). The first token is never part of the scan.
    """

    def __init__(self, phrases: Iterable[str] = ()):
        self._phrases = frozenset(phrase for phrase in phrases if phrase)
        self._root = _Node()
        for phrase in self._phrases:
            self._insert(phrase)

    def _insert(self, phrase: str) -> None:
        node = self._root
        for ch in reversed(phrase):
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._phrases

    def __len__(self) -> int:
        return len(self._phrases)

    def __iter__(self) -> Iterator[str]:
        return iter(self._phrases)

    def __repr__(self) -> str:
        return f"LegalForms({len(self._phrases)} phrases)"

    def _extend(self, node: _Node, cleaned_token: str) -> Optional[_Node]:
        """Prepend a cleaned token to the window represented by node."""
        for ch in reversed(cleaned_token):
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _scan(self, cleaned_tokens: list[str], last: int) -> int:
        """
        Find the legal form span ending at index last.

        Returns:
            Start index of the span, or last + 1 if nothing matched
        """
        start = last + 1
        node = self._root
        for i in range(last, 0, -1):
            node = self._extend(node, cleaned_tokens[i])
            if node is None:
                # No phrase ends with the current window
                break
            if node.terminal:
                start = i
        return start

    def strip_tokens(self, tokens: list[str], cleaned_tokens: list[str]) -> int:
        """
        Locate a legal form at the end of a token sequence.

        Args:
            tokens: Original tokens
            cleaned_tokens: clean() of each token, same length as tokens

        Returns:
            Index where the legal form starts; len(tokens) if there is none
        """
        return self._scan(cleaned_tokens, len(tokens) - 1)

    def strip_middle_tokens(
        self, tokens: list[str], cleaned_tokens: list[str]
    ) -> tuple[int, int]:
        """
        Locate a legal form anywhere in a token sequence.

        Every right boundary is tried from the end inwards. The first one with
        a legal form of at least MIN_LEGAL_FORM_LENGTH characters wins.

        Returns:
            (start, end) of the legal form span, end exclusive. Both are
            len(tokens) if there is none.
        """
        for last in range(len(tokens) - 1, 0, -1):
            start = self._scan(cleaned_tokens, last)
            if start > last:
                continue
            legal_form = " ".join(tokens[start : last + 1])
            cleaned = "".join(cleaned_tokens[start : last + 1])
            if len(legal_form) >= MIN_LEGAL_FORM_LENGTH and len(cleaned) >= MIN_LEGAL_FORM_LENGTH:
                return start, last + 1
        return len(tokens), len(tokens)

    def strip(self, full_name: str) -> tuple[str, str]:
        """Split a name into company name and trailing legal form."""
        tokens = tokenize(full_name)
        start = self.strip_tokens(tokens, [clean(token) for token in tokens])
        return " ".join(tokens[:start]), " ".join(tokens[start:])

    def strip_middle(self, full_name: str) -> tuple[str, str, str]:
        """Split a name into company name, legal form and the text after it."""
        tokens = tokenize(full_name)
        start, end = self.strip_middle_tokens(tokens, [clean(token) for token in tokens])
        if start == end:
            return " ".join(tokens), "", ""
        return " ".join(tokens[:start]), " ".join(tokens[start:end]), " ".join(tokens[end:])
