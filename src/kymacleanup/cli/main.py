#!/usr/bin/env python3
"""
KYMA CLEANUP CLI
----------------
Finds resources a Kyma upgrade leaves behind and writes a kubectl
deletion script for them. Flags keep the single-dash spelling of the
original tool (`-from`, `-to`, `-output`, `-ignore`); the double-dash
forms are accepted too.

Exit codes: 0 on success (including an empty delta), 2 on any error.

Author: Kyma Cleanup Team
Date: 2026-10-17
"""

import sys
import logging
import argparse
from typing import List, Optional

from kymacleanup.cli.formatter import DeltaFormatter
from kymacleanup.core.engine import DeltaEngine
from kymacleanup.core.errors import DeltaError
from kymacleanup.core.models import DeltaOptions

VERSION = "0.1.0"
EXIT_OK = 0
EXIT_ERROR = 2

class KymaCleanupCLI:
    """
    CLI wrapper that translates flags into a DeltaEngine run.
    """

    def __init__(self, formatter: Optional[DeltaFormatter] = None):
        self.formatter = formatter or DeltaFormatter()
        self.parser = argparse.ArgumentParser(
            prog="kyma-cleanup",
            description="Kyma upgrade cleanup - lists resources orphaned by an upgrade "
                        "and generates a kubectl deletion script",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        # Required flags are checked by the engine so the error reads 'flag not specified: <name>'
        self.parser.add_argument("-from", "--from", dest="from_file", default="",
                                 help="Path to manifests file before upgrade.")
        self.parser.add_argument("-to", "--to", dest="to_file", default="",
                                 help="Path to manifests file of upgrade.")
        self.parser.add_argument("-output", "--output", dest="output_file", default=None,
                                 help="Name of the cleanup script file to be generated.")
        self.parser.add_argument("-ignore", "--ignore", dest="ignored", default="",
                                 help="List of resources to ignore. "
                                      "Usage: -ignore kind1:name1,kind2:name2 "
                                      "Example: -ignore service:foo,servicemonitors.monitoring.coreos.com:bar")
        self.parser.add_argument("-v", "--verbose", action="store_true",
                                 help="Enable debug logging on stderr")
        self.parser.add_argument("--version", action="version", version=f"kyma-cleanup v{VERSION}")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        options = DeltaOptions(
            from_file=args.from_file,
            to_file=args.to_file,
            output_file=args.output_file,
            ignored=args.ignored,
        )
        try:
            DeltaEngine(self.formatter).run(options)
        except DeltaError as e:
            self.formatter.print_error(e)
            return EXIT_ERROR
        return EXIT_OK

def main():
    """Application entry point with interrupt handling."""
    cli = KymaCleanupCLI()
    try:
        sys.exit(cli.run())
    except KeyboardInterrupt:
        cli.formatter.console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(EXIT_ERROR)

if __name__ == "__main__":
    main()
