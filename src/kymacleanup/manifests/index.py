"""
Indexed manifest set: identity key -> identity, one entry per (kind, name).
"""

import logging
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from kymacleanup.core.models import ManifestIdentity
from kymacleanup.manifests.loader import ManifestLoader
from kymacleanup.validator.validator import IdentityValidator

logger = logging.getLogger("kymacleanup.index")

class ManifestIndex:
    """
    Maps (kind, name) to the identity last seen for it in a manifest stream.
    """

    def __init__(self):
        self._entries: Dict[Tuple[str, str], ManifestIdentity] = {}

    @classmethod
    def from_documents(cls, docs: Iterable[Dict[str, Any]],
                       validator: Optional[IdentityValidator] = None) -> "ManifestIndex":
        validator = validator or IdentityValidator()
        index = cls()
        for doc in docs:
            index.add(validator.extract(doc))
        return index

    @classmethod
    def from_file(cls, path: str, loader: ManifestLoader,
                  validator: Optional[IdentityValidator] = None) -> "ManifestIndex":
        index = cls.from_documents(loader.load(path), validator)
        logger.debug(f"Indexed {len(index)} manifests from {path}")
        return index

    def add(self, identity: ManifestIdentity):
        previous = self._entries.get(identity.key)
        if previous is not None:
            logger.debug(f"Duplicate manifest {identity.kind}/{identity.name}: "
                         f"{previous.api_version} replaced by {identity.api_version}")
        self._entries[identity.key] = identity

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ManifestIdentity]:
        return iter(self._entries.values())
