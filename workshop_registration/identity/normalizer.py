"""Identity field normalization for member matching.

Canonicalizes free-text names, emails and phone numbers so that values
typed differently by a registrant and by whoever maintains the roster
compare equal ("Ionuț Popescu" vs "ionut  popescu", "+40 724 123 456"
vs "0724123456").
"""

import re
import unicodedata

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """Remove combining marks, e.g. "ș" -> "s", "Ă" -> "A"."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize_text(text: str | None) -> str:
    """Lowercase and strip diacritics."""
    if not text:
        return ""
    return strip_diacritics(text).lower()


def normalize_name(text: str | None) -> str:
    """Normalize a name fragment and drop all whitespace."""
    return _WHITESPACE.sub("", normalize_text(text))


def normalize_email(email: str | None) -> str:
    """Normalize an email for exact comparison."""
    return normalize_text(email).strip()


def normalize_phone(phone: str | None) -> str:
    """Keep digits only ("+40 (724) 123-456" -> "40724123456")."""
    if not phone:
        return ""
    return _NON_DIGITS.sub("", phone)


def phones_match(phone1: str | None, phone2: str | None) -> bool:
    """Check if two phone numbers match.

    Either normalized number containing the other counts as a match, so a
    number stored with a country code matches one typed without it. Short
    numbers can therefore match unrelated ones; this is accepted given
    roster sizes.

    Args:
        phone1: Phone number in any format
        phone2: Phone number in any format

    Returns:
        True if both are non-empty and one contains the other
    """
    p1 = normalize_phone(phone1)
    p2 = normalize_phone(phone2)

    if not p1 or not p2:
        return False

    return p1 in p2 or p2 in p1


def emails_match(email1: str | None, email2: str | None) -> bool:
    """Exact comparison of normalized emails; empty never matches."""
    e1 = normalize_email(email1)
    return bool(e1) and e1 == normalize_email(email2)


def name_candidates(full_name: str | None) -> list[tuple[str, str]]:
    """Derive possible (first, last) splits from a single name field.

    The form asks for "Nume Prenume" but people type both orders, and
    compound names are ambiguous, so several splits are tried:

    - first word as first name, remainder as last name
    - last word as last name, remainder as first name
    - for exactly two words, the two words swapped

    A single word yields ``(word, "")`` and ``("", word)``.

    Args:
        full_name: Free-text full name

    Returns:
        Unique candidate splits in derivation order (empty for a blank name)
    """
    words = (full_name or "").split()
    if not words:
        return []
    if len(words) == 1:
        return [(words[0], ""), ("", words[0])]

    candidates = [
        (words[0], " ".join(words[1:])),
        (" ".join(words[:-1]), words[-1]),
    ]
    if len(words) == 2:
        candidates.append((words[1], words[0]))

    return list(dict.fromkeys(candidates))


def name_variants(first_name: str | None, last_name: str | None) -> set[str]:
    """Build the comparable forms of a (first, last) pair.

    Returns both first+last and last+first, normalized. A pair that
    normalizes to nothing yields an empty set so it can never match.
    """
    first = normalize_name(first_name)
    last = normalize_name(last_name)
    if not first and not last:
        return set()
    return {first + last, last + first}
