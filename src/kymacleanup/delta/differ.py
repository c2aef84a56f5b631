"""
Set difference between two manifest indexes.
"""

from typing import List, Optional

from kymacleanup.core.models import ManifestIdentity
from kymacleanup.manifests.index import ManifestIndex
from kymacleanup.rules.ignore import IgnoreRules

def sort_key(identity: ManifestIdentity):
    return (identity.kind, identity.name)

def find_orphans(source: ManifestIndex, target: ManifestIndex,
                 ignored: Optional[IgnoreRules] = None) -> List[ManifestIdentity]:
    """
    Returns the resources of `source` that `target` no longer ships.

    Presence is decided on (kind, name) only: a resource moved to another
    apiVersion is continued, not orphaned. Sorting happens after the
    ignore filter so the result depends on the orphan set alone.
    """
    orphans = [identity for identity in source if identity.key not in target]
    if ignored is not None:
        orphans = ignored.apply(orphans)
    return sorted(orphans, key=sort_key)
