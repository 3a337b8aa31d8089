"""
Card name normalization.

Maps a raw name token to the form used as a search key: lower case, with a
fixed set of accented and typographic characters folded to ASCII.

This is NOT general transliteration. The table lists exactly the characters
seen in the exports, and some rows repair specific source artifacts. Keep
it literal: adding a generic accent stripper would change keys for inputs
the table was never meant to touch.
"""

# Applied in order, after lower-casing.
NAME_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("ú", "u"),
    ("’", "'"),  # right single quotation mark
    ("í", "i"),
    ("û", "u"),
    ("î", "i"),
    ("ó", "o"),
    ("é", "e"),
    ("â", "a"),
    ("“", ""),  # left double quotation mark
    ("ë", "e"),
    ("”", ""),  # right double quotation mark
    ("á", "a"),
    # A no-break space stands in for "eo" in some exported names.
    ("\u00a0", "eo"),
    ("ä", "a"),
    ("\u0301", ""),  # combining acute accent
    ("ö", "o"),
    # A stray combining circumflex replaces a "u" in some exported names.
    ("\u0302", "u"),
)


def normalize(raw: str) -> str:
    """
    Return the comparison form of a name token.

    Pure and total. normalize(normalize(x)) == normalize(x).
    """
    name = raw.lower()
    for source, target in NAME_SUBSTITUTIONS:
        name = name.replace(source, target)
    return name
