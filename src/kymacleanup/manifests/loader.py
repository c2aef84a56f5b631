#!/usr/bin/env python3
"""
KYMA CLEANUP LOADER - Multi-Document Reader
-------------------------------------------
Turns a rendered manifest file (documents separated by '---') into a lazy
stream of decoded mappings. Documents that are valid YAML but not a
Kubernetes object (a bare list, a scalar) are skipped with a warning;
anything the decoder itself rejects aborts the whole file.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from kymacleanup.cli.formatter import DeltaFormatter
from kymacleanup.core.errors import ManifestParseError, ManifestReadError

logger = logging.getLogger("kymacleanup.loader")

class ManifestConstructor(SafeConstructor):
    """
    Safe constructor that keeps timestamp-like scalars as text, so a
    resource named 2023-10-01 stays a string.
    """

ManifestConstructor.add_constructor('tag:yaml.org,2002:timestamp', SafeConstructor.construct_yaml_str)

class ManifestLoader:
    """
    Reads manifest files with a safe ruamel loader.
    Only plain Python containers come out; no round-trip metadata is kept.
    """

    def __init__(self, formatter: Optional[DeltaFormatter] = None):
        self.yaml = YAML(typ='safe')
        self.yaml.Constructor = ManifestConstructor
        self.formatter = formatter or DeltaFormatter()

    def read(self, path: str) -> str:
        """Reads the whole file (BOM-aware). Undecodable bytes are a parse failure."""
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise ManifestReadError(f"unable to read manifest file at '{path}': {e}") from e
        try:
            return raw.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise ManifestParseError(f"unable to parse manifests: {e}") from e

    def load(self, path: str) -> Iterator[Dict[str, Any]]:
        """Yields every mapping document of the file in stream order."""
        text = self.read(path)
        logger.debug(f"Decoding manifests from {path}")
        yield from self.decode(text)

    def decode(self, text: str) -> Iterator[Dict[str, Any]]:
        try:
            for position, doc in enumerate(self.yaml.load_all(text), 1):
                if doc is None:
                    continue

                if not isinstance(doc, dict):
                    self._warn_type_error(f"document {position}: cannot unmarshal {type(doc).__name__} into a mapping")
                    continue

                yield self._string_keys(doc)
        except YAMLError as e:
            raise ManifestParseError(f"unable to parse manifests: {e}") from e

    def _string_keys(self, doc: Dict[Any, Any]) -> Dict[str, Any]:
        """Top-level keys such as `1:` or `true:` become their YAML text."""
        if all(isinstance(key, str) for key in doc):
            return doc
        converted = {}
        for key, value in doc.items():
            if isinstance(key, bool):
                key = "true" if key else "false"
            elif not isinstance(key, str):
                key = str(key)
            converted[key] = value
        return converted

    def _warn_type_error(self, description: str):
        logger.debug(f"Skipping document: {description}")
        self.formatter.print_warning(f"type error: {description}")
