"""Member identity matching for workshop registrations.

This module provides:
- MemberMatcher: Priority-ordered matching of a registrant against the roster
- Normalization of names, emails and phone numbers (diacritics, spacing,
  country codes, name order)
- Schemas for roster entries, submissions and match results
"""

from workshop_registration.identity.member_matcher import MemberMatcher
from workshop_registration.identity.normalizer import (
    name_candidates,
    normalize_email,
    normalize_name,
    normalize_phone,
    phones_match,
)
from workshop_registration.identity.schemas import (
    MatchResult,
    MatchRule,
    RosterEntry,
    Submission,
)

__all__ = [
    "MatchResult",
    "MatchRule",
    "MemberMatcher",
    "RosterEntry",
    "Submission",
    "name_candidates",
    "normalize_email",
    "normalize_name",
    "normalize_phone",
    "phones_match",
]
