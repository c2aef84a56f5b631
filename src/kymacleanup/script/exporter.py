#!/usr/bin/env python3
"""
KYMA CLEANUP EXPORTER - Deletion Script
---------------------------------------
Renders the orphan list into a bash script of `kubectl delete` commands.
The script is plain text: it is neither executed nor made executable here.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

import logging
from typing import List, Optional

from kymacleanup.cli.formatter import DeltaFormatter
from kymacleanup.core.errors import ScriptWriteError
from kymacleanup.core.models import ManifestIdentity

logger = logging.getLogger("kymacleanup.exporter")

SHEBANG = "#!/usr/bin/env bash"
NAMESPACE = "kyma-system"

class DeletionScriptExporter:
    """
    The Reconstructor: converts orphan identities back into kubectl commands.
    """

    def __init__(self, formatter: Optional[DeltaFormatter] = None):
        self.formatter = formatter or DeltaFormatter()
        self.namespace = NAMESPACE

    def command(self, identity: ManifestIdentity) -> str:
        return f"kubectl delete -n {self.namespace} {identity.simple_kind} {identity.name.lower()}\n"

    def render(self, orphans: List[ManifestIdentity]) -> str:
        """Header, blank line, then one command per orphan in the given order."""
        lines = [f"{SHEBANG}\n", "\n"]
        lines.extend(self.command(identity) for identity in orphans)
        return "".join(lines)

    def export(self, orphans: List[ManifestIdentity], path: str) -> str:
        """
        Writes the script to `path`. A failed write may leave a partial file.
        """
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as script:
                script.write(self.render(orphans))
                script.flush()
        except OSError as e:
            raise ScriptWriteError(f"error writing to file: {e}") from e

        logger.debug(f"Wrote {len(orphans)} deletion commands to {path}")
        self.formatter.print_script_created(path)
        return path
