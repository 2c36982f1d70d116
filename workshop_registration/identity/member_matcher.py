"""Member matching against the workshop roster.

Decides whether a registrant qualifies for the member price. Each roster
entry is checked against four rules in priority order:

1. Name + phone
2. Name + email
3. Email + phone
4. Email alone (fallback)

The roster is scanned in sheet order and the first entry satisfying any
rule wins, so an earlier entry matched by email beats a later entry
matched by name + phone.
"""

from collections.abc import Sequence

from workshop_registration.identity.normalizer import (
    emails_match,
    name_candidates,
    name_variants,
    phones_match,
)
from workshop_registration.identity.schemas import (
    MatchResult,
    MatchRule,
    RosterEntry,
    Submission,
)


class MemberMatcher:
    """Rule-based member matching.

    Stateless: safe to share between concurrent requests. Malformed or
    empty input never raises, it simply fails to match.
    """

    def match(
        self,
        submission: Submission,
        roster: Sequence[RosterEntry],
    ) -> MatchResult:
        """Find the roster entry a submission belongs to.

        Args:
            submission: Registrant email, phone and name
            roster: Members in sheet order

        Returns:
            MatchResult for the first matching entry, or a non-member result
        """
        submitted_names = self._submission_variants(submission)

        for entry in roster:
            rule = self._first_matching_rule(submission, submitted_names, entry)
            if rule is not None:
                return MatchResult(
                    is_member=True,
                    matched_by=rule,
                    matched_entry=entry,
                )

        return MatchResult(is_member=False)

    def match_by_email_only(
        self,
        email: str,
        roster: Sequence[RosterEntry],
    ) -> MatchResult:
        """Quick membership check used before the rest of the form is filled.

        Args:
            email: Email typed by the registrant
            roster: Members in sheet order

        Returns:
            MatchResult for the first entry with the same email
        """
        for entry in roster:
            if emails_match(email, entry.email):
                return MatchResult(
                    is_member=True,
                    matched_by=MatchRule.EMAIL,
                    matched_entry=entry,
                )
        return MatchResult(is_member=False)

    def _first_matching_rule(
        self,
        submission: Submission,
        submitted_names: set[str],
        entry: RosterEntry,
    ) -> MatchRule | None:
        """Evaluate the rules for one entry, highest priority first."""
        name_ok = not submitted_names.isdisjoint(
            name_variants(entry.first_name, entry.last_name)
        )
        phone_ok = phones_match(submission.phone, entry.phone)
        email_ok = emails_match(submission.email, entry.email)

        if name_ok and phone_ok:
            return MatchRule.NAME_PHONE
        if name_ok and email_ok:
            return MatchRule.NAME_EMAIL
        if email_ok and phone_ok:
            return MatchRule.EMAIL_PHONE
        if email_ok:
            return MatchRule.EMAIL
        return None

    @staticmethod
    def _submission_variants(submission: Submission) -> set[str]:
        """Normalized name forms across all candidate splits."""
        if submission.has_split_name:
            candidates = [(submission.first_name or "", submission.last_name or "")]
        else:
            candidates = name_candidates(submission.name)

        variants: set[str] = set()
        for first, last in candidates:
            variants |= name_variants(first, last)
        return variants
