"""Record and variable dataclasses - One ads.txt data line each."""

from dataclasses import dataclass
from enum import Enum


class Relation(Enum):
    """Type of account/relationship (FIELD #3)."""

    DIRECT = "DIRECT"
    RESELLER = "RESELLER"

    @classmethod
    def parse(cls, text: str) -> "Relation | None":
        """Match a relation keyword case-insensitively.

        Returns None for anything other than DIRECT or RESELLER. Only ASCII
        letters fold, so lookalikes such as 'dırect' are rejected.
        """
        text = text.strip()
        if not text.isascii():
            return None
        try:
            return cls(text.upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Record:
    """One authorized-seller declaration.

    Attributes:
        domain: Domain name of the advertising system (FIELD #1).
        account_id: Publisher's account ID on that system (FIELD #2).
        relation: DIRECT or RESELLER (FIELD #3).
        authority_id: Certification authority ID, e.g. a TAG-ID (FIELD #4).
    """

    domain: str
    account_id: str
    relation: Relation
    authority_id: str | None = None

    def to_line(self) -> str:
        """Re-join the fields the way they appear in an ads.txt file."""
        fields = [self.domain, self.account_id, self.relation.value]
        if self.authority_id:
            fields.append(self.authority_id)
        return ", ".join(fields)


@dataclass(frozen=True)
class Variable:
    """A top-level name=value declaration such as contact or subdomain.

    The name is kept exactly as written; lookups on AdsTxt ignore case.
    """

    name: str
    value: str

    def to_line(self) -> str:
        return f"{self.name}={self.value}"
