"""Text normalization for geocoding queries."""

import unicodedata


def to_ascii(text: str) -> str:
    """Transliterate text to plain ASCII.

    Accented letters lose their marks ("Zürich" -> "Zurich"); characters with
    no ASCII decomposition are dropped.

    Args:
        text: Arbitrary user input.

    Returns:
        ASCII-only string.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).encode(
        "ascii", "ignore"
    ).decode("ascii")
