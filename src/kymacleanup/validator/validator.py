#!/usr/bin/env python3
"""
KYMA CLEANUP VALIDATOR - Identity Extraction
--------------------------------------------
Reduces a decoded manifest to its (apiVersion, kind, name) triple.
A document without a usable identity cannot be compared across versions,
so every missing or malformed field is a hard failure rather than a skip.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

from typing import Any, Dict

from kymacleanup.core.errors import ManifestParseError
from kymacleanup.core.models import ManifestIdentity

class IdentityValidator:
    """
    Enforces the identity fields every Kubernetes resource must carry
    and extracts them into a ManifestIdentity.
    """

    def __init__(self):
        # Core fields that must exist in every single K8s resource
        self.required_fields = ["apiVersion", "kind", "metadata"]

    def extract(self, doc: Dict[str, Any]) -> ManifestIdentity:
        """
        Returns the identity of the document or raises ManifestParseError.
        """
        for field in self.required_fields:
            if field not in doc:
                self._fail(doc, f"missing required field '{field}'")

        metadata = doc["metadata"]
        if not isinstance(metadata, dict):
            self._fail(doc, "field 'metadata' must be a mapping")
        if "name" not in metadata:
            self._fail(doc, "missing required field 'metadata.name'")

        return ManifestIdentity(
            api_version=self._require_string(doc, doc["apiVersion"], "apiVersion"),
            kind=self._require_string(doc, doc["kind"], "kind"),
            name=self._require_string(doc, metadata["name"], "metadata.name"),
        )

    def _require_string(self, doc: Dict[str, Any], value: Any, path: str) -> str:
        if not isinstance(value, str):
            self._fail(doc, f"field '{path}' must be a string, got {type(value).__name__}")
        if not value:
            self._fail(doc, f"field '{path}' must not be empty")
        return value

    def _fail(self, doc: Dict[str, Any], reason: str):
        # Whatever identity fragments exist help locate the document in the stream
        hint = ", ".join(
            f"{k}={doc[k]!r}" for k in ("kind", "apiVersion") if isinstance(doc.get(k), str)
        )
        where = f" ({hint})" if hint else ""
        raise ManifestParseError(f"unable to parse manifests: {reason}{where}")
