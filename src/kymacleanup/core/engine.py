#!/usr/bin/env python3
"""
KYMA CLEANUP ENGINE - The Orchestrator
--------------------------------------
DeltaEngine drives one comparison run: options check, ignore-list parse,
indexing of both manifest sets, set difference, report and (optionally)
the deletion script. Every failure surfaces as a DeltaError; nothing
here decides exit codes.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

import logging
from typing import Optional

from kymacleanup.cli.formatter import DeltaFormatter
from kymacleanup.core.errors import ConfigurationError
from kymacleanup.core.models import DeltaOptions, DeltaResult
from kymacleanup.delta.differ import find_orphans
from kymacleanup.manifests.index import ManifestIndex
from kymacleanup.manifests.loader import ManifestLoader
from kymacleanup.rules.ignore import IgnoreRules
from kymacleanup.script.exporter import DeletionScriptExporter
from kymacleanup.validator.validator import IdentityValidator

logger = logging.getLogger("kymacleanup.engine")

class DeltaEngine:
    """
    Principal orchestrator for upgrade cleanup.
    Components share one formatter so warnings and results land in the same stream.
    """

    def __init__(self, formatter: Optional[DeltaFormatter] = None):
        self.formatter = formatter or DeltaFormatter()
        self.loader = ManifestLoader(self.formatter)
        self.validator = IdentityValidator()
        self.exporter = DeletionScriptExporter(self.formatter)

    def run(self, options: DeltaOptions) -> DeltaResult:
        """
        Compares `from` against `to` and reports what the upgrade leaves behind.
        """
        # Phase 1: Configuration (no file is touched before this passes)
        self._check_required(options)
        ignored = IgnoreRules.parse(options.ignored)

        # Phase 2: Indexing
        source = ManifestIndex.from_file(options.from_file, self.loader, self.validator)
        target = ManifestIndex.from_file(options.to_file, self.loader, self.validator)
        logger.info(f"Comparing {len(source)} manifests against {len(target)}")
        if ignored:
            logger.info(f"Applying {len(ignored)} ignore rules")

        # Phase 3: Delta
        result = DeltaResult(orphans=find_orphans(source, target, ignored))

        # Phase 4: Report & Export
        self.formatter.print_summary(result.orphans)
        if result.is_clean:
            return result

        if options.output_file:
            result.script_path = self.exporter.export(result.orphans, options.output_file)
        return result

    def _check_required(self, options: DeltaOptions):
        if not options.from_file:
            raise ConfigurationError("flag not specified: from")
        if not options.to_file:
            raise ConfigurationError("flag not specified: to")
