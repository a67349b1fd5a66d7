# reading_import/shared/utils/text_utils.py

"""Text cleaning and normalization utilities for titles, authors and reviews"""

# Standard library imports
from re import compile as re_compile
from re import split as re_split
from re import sub

# Third party imports
from bs4 import BeautifulSoup
from unidecode import unidecode

STOPWORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "but",
        "by",
        "for",
        "if",
        "in",
        "into",
        "is",
        "it",
        "no",
        "not",
        "of",
        "on",
        "or",
        "such",
        "that",
        "the",
        "their",
        "then",
        "there",
        "these",
        "they",
        "this",
        "to",
        "was",
        "will",
        "with",
    }
)

TITLE_PREFIXES = ("a ", "an ", "the ")

_TAG_HINT = re_compile(r"<[^>]+>|&[a-zA-Z#0-9]+;")
_WHITESPACE = re_compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim"""
    return _WHITESPACE.sub(" ", text).strip()


def strip_html(text: str | None) -> str:
    """Remove markup from free text such as exported reviews

    Line breaks are kept as newlines so multi-paragraph reviews stay readable.

    Args:
        text: Text that may contain HTML tags or entities

    Returns:
        Plain text
    """
    if not text:
        return ""

    # Skip the parser for plain text
    if not _TAG_HINT.search(text):
        return text

    soup = BeautifulSoup(text, "html.parser")
    for line_break in soup.find_all("br"):
        line_break.replace_with("\n")
    return soup.get_text()


def clean_text(text: str | None) -> str | None:
    """Strip markup and collapse whitespace, None for empty results"""
    cleaned = collapse_whitespace(strip_html(text))
    return cleaned or None


def clean_review(text: str | None) -> str | None:
    """Strip markup from a review while keeping paragraph breaks"""
    plain = strip_html(text)
    lines = [collapse_whitespace(line) for line in plain.splitlines()]
    cleaned = "\n".join(line for line in lines if line)
    return cleaned or None


def ascii_fold(text: str) -> str:
    """Convert accented characters to their ASCII equivalents using unidecode"""
    if not text:
        return ""
    return unidecode(text)


def normalize_for_matching(text: str | None) -> str:
    """Case, diacritic and punctuation insensitive form of a string

    Apostrophes are dropped so possessives stay one token ("Ender's" -> "enders");
    every other non-alphanumeric character becomes a space.

    Examples:
        >>> normalize_for_matching("The Land of Stories: The Wishing Spell")
        'the land of stories the wishing spell'
        >>> normalize_for_matching("Les Misérables")
        'les miserables'
    """
    if not text:
        return ""

    folded = ascii_fold(text).lower()
    folded = sub(r"['`]", "", folded)
    folded = sub(r"[^a-z0-9\s]", " ", folded)
    return collapse_whitespace(folded)


def remove_stopwords(text: str) -> str:
    """Drop stopwords from an already normalized string

    Returns the input unchanged when every word is a stopword.
    """
    words = [word for word in text.split() if word not in STOPWORDS]
    return " ".join(words) if words else text


def main_title(title: str | None) -> str:
    """Title without its subtitle (text before the first colon or parenthesis)

    Examples:
        >>> main_title("Dune (Dune Chronicles, #1)")
        'Dune'
        >>> main_title("Sapiens: A Brief History of Humankind")
        'Sapiens'
    """
    if not title:
        return ""

    head = re_split(r"[:(]", title, maxsplit=1)[0].strip()
    return head or title.strip()


def normalize_title(
    title: str | None, remove_stopwords_flag: bool = False, remove_subtitle: bool = False
) -> str:
    """Normalize a book title for matching

    Args:
        title: Raw title
        remove_stopwords_flag: Drop common English stopwords
        remove_subtitle: Keep only the part before a colon or parenthesis

    Returns:
        Normalized title
    """
    if not title:
        return ""

    text = strip_html(title)
    if remove_subtitle:
        text = main_title(text)

    normalized = normalize_for_matching(text)
    if remove_stopwords_flag:
        normalized = remove_stopwords(normalized)
    return normalized


def normalize_author(author: str | None) -> str:
    """Normalize an author name, turning "Last, First" into "first last"

    Examples:
        >>> normalize_author("Colfer, Chris")
        'chris colfer'
    """
    if not author:
        return ""

    text = collapse_whitespace(strip_html(author))
    if text.count(",") == 1:
        last, first = (part.strip() for part in text.split(","))
        if first and last:
            text = f"{first} {last}"
    return normalize_for_matching(text)


def normalize_authors(authors: list[str] | str | None) -> list[str]:
    """Normalize a list of authors or a comma/semicolon separated string

    Empty names are removed.
    """
    if not authors:
        return []

    if isinstance(authors, str):
        names = re_split(r"[,;]+", authors)
    else:
        names = authors

    normalized = (normalize_author(name) for name in names)
    return [name for name in normalized if name]


def split_author_names(value: str | None) -> list[str]:
    """Split a comma separated author field into cleaned display names"""
    if not value:
        return []

    names = (clean_text(name) for name in re_split(r"[,;]+", value))
    return [name for name in names if name]


def remove_title_prefix(title: str | None) -> str:
    """Remove a leading article for sorting

    Examples:
        >>> remove_title_prefix("The Lord of the Rings")
        'Lord of the Rings'
    """
    if not title:
        return ""

    stripped = title.strip()
    lowered = stripped.lower()
    for prefix in TITLE_PREFIXES:
        if lowered.startswith(prefix):
            return stripped[len(prefix) :]
    return stripped
