#!/usr/bin/env python3
"""
KYMA CLEANUP IGNORE RULES - Operator Suppression
------------------------------------------------
Parses the `-ignore kind1:name1,kind2:name2` flag and filters orphans
the operator wants to keep. Kinds are written in kubectl resource form
(`servicemonitors.monitoring.coreos.com`, `configmap`); the singular
group-qualified form is accepted as well.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

import logging
from typing import FrozenSet, Iterable, List

from kymacleanup.core.errors import ConfigurationError
from kymacleanup.core.models import IgnoreEntry, ManifestIdentity

logger = logging.getLogger("kymacleanup.ignore")

class IgnoreRules:
    """
    An immutable set of IgnoreEntry pairs. Matching never looks at the
    apiVersion, so one entry covers a resource across group versions.
    """

    def __init__(self, entries: Iterable[IgnoreEntry] = ()):
        self.entries: FrozenSet[IgnoreEntry] = frozenset(entries)

    @classmethod
    def parse(cls, ignored: str) -> "IgnoreRules":
        """
        Builds rules from the comma-separated flag value.
        An empty value yields an empty rule set.
        """
        if not ignored or not ignored.strip():
            return cls()

        entries = []
        for raw_entry in ignored.split(","):
            parts = raw_entry.split(":")
            if len(parts) != 2:
                raise ConfigurationError(f"invalid ignored manifest format: {raw_entry}")

            kind, name = parts[0].strip(), parts[1].strip()
            if not kind or not name:
                raise ConfigurationError(f"invalid ignored manifest format: {raw_entry}")

            entries.append(IgnoreEntry(kind=kind.lower(), name=name))

        logger.debug(f"Parsed {len(entries)} ignore entries")
        return cls(entries)

    def matches(self, identity: ManifestIdentity) -> bool:
        for token in identity.kind_tokens():
            if IgnoreEntry(kind=token, name=identity.name) in self.entries:
                return True
        return False

    def apply(self, identities: Iterable[ManifestIdentity]) -> List[ManifestIdentity]:
        """Drops every identity matched by a rule, keeping the input order."""
        kept = []
        for identity in identities:
            if self.entries and self.matches(identity):
                logger.debug(f"Ignoring {identity.simple_kind} {identity.name}")
                continue
            kept.append(identity)
        return kept

    def __len__(self) -> int:
        return len(self.entries)
