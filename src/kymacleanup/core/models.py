#!/usr/bin/env python3
"""
KYMA CLEANUP CORE MODELS
------------------------
Defines the data structures shared across the delta engine.
A manifest is reduced to its identity triple as soon as it is decoded;
nothing else from the document survives past the index.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

VOWELS = "aeiou"

def pluralize(kind: str) -> str:
    """Naive English plural of a lowercased kind: policy -> policies, deployment -> deployments."""
    if len(kind) > 1 and kind.endswith("y") and kind[-2] not in VOWELS:
        return kind[:-1] + "ies"
    return kind + "s"


@dataclass(frozen=True)
class ManifestIdentity:
    """
    The (apiVersion, kind, name) triple of a single Kubernetes resource.

    Two manifests are the same resource across versions when their
    (kind, name) pair matches; the apiVersion is carried only to build
    the grouped resource token for kubectl.
    """
    api_version: str        # e.g. 'apps/v1' or 'v1' for the core group
    kind: str               # Singular resource kind (e.g. 'Deployment')
    name: str               # metadata.name

    @property
    def key(self) -> Tuple[str, str]:
        """Lookup key of the indexed manifest set."""
        return (self.kind, self.name)

    @property
    def group(self) -> Optional[str]:
        """Lowercased API group, or None for core-group resources."""
        if "/" not in self.api_version:
            return None
        return self.api_version.split("/", 1)[0].lower()

    @property
    def simple_kind(self) -> str:
        """
        Resource token as passed to `kubectl delete`.

        Grouped kinds get a plural plus the group
        (Deployment + apps/v1 -> deployments.apps,
        PodSecurityPolicy + policy/v1beta1 -> podsecuritypolicies.policy);
        core kinds stay singular (ConfigMap + v1 -> configmap).
        """
        kind = self.kind.lower()
        if self.group is None:
            return kind
        return f"{pluralize(kind)}.{self.group}"

    def kind_tokens(self) -> Tuple[str, ...]:
        """All resource tokens an operator may use to refer to this kind."""
        kind = self.kind.lower()
        if self.group is None:
            return (kind, pluralize(kind))
        return (self.simple_kind, f"{kind}.{self.group}")

    def __str__(self) -> str:
        return f"{{apiVersion:{self.api_version} kind:{self.kind} name:{self.name}}}"


@dataclass(frozen=True)
class IgnoreEntry:
    """A (kind, name) pair suppressed from the deletion script."""
    kind: str
    name: str


@dataclass
class DeltaOptions:
    """Run options collected from the command line."""
    from_file: str = ""
    to_file: str = ""
    output_file: Optional[str] = None
    ignored: str = ""


@dataclass
class DeltaResult:
    """Outcome of a single engine run."""
    orphans: List[ManifestIdentity] = field(default_factory=list)
    script_path: Optional[str] = None

    @property
    def is_clean(self) -> bool:
        return not self.orphans
