"""Text processing utilities."""

import unicodedata

# Characters removed from a token before it is used as a lookup key
STRIPPED_CHARS = ".-/\"’()&',: "

_CLEAN_TABLE = str.maketrans("", "", STRIPPED_CHARS)

# Letters that carry no decomposable diacritic in Unicode
_FOLD_TABLE = str.maketrans(
    {
        "ß": "ss",
        "ø": "o",
        "ł": "l",
        "đ": "d",
        "þ": "th",
        "ı": "i",
    }
)


def clean(token: str) -> str:
    """Lowercase a token and remove the fixed punctuation set."""
    return token.lower().translate(_CLEAN_TABLE)


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace, keeping the original token text."""
    return text.split()


def compact(text: str) -> str:
    """Remove every whitespace character."""
    return "".join(text.split())


def fold_diacritics(text: str) -> str:
    """
    Fold accented characters of lowercase text to their base form.

    Only combining marks are dropped, so letters of non-Latin scripts keep
    their script (e.g. "й" becomes "и", Greek and CJK are unchanged).
    """
    text = unicodedata.normalize("NFKD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", text.translate(_FOLD_TABLE))
