"""
Example demonstrating the Loggable mixin.

This example shows how to configure the process-wide defaults, log from a
class, and route messages to several sinks with different minimum severities.
"""

import io

from loggable import Loggable, configure

# Set up the process-wide defaults once, before anything logs
registry = configure(DEFAULT_APPLICATION="Importer", DEFAULT_LEVEL="DEBUG")

# Errors also go to stderr, as JSON
registry.add_sink("stderr", level="ERROR", layout="structured")


class FileImporter(Loggable):
    """Import files, reporting progress through the mixin."""

    def run(self, names):
        self.info("Importing %d files", len(names))
        for name in names:
            if name.endswith(".tmp"):
                self.warn("Skipping temporary file %s", name)
                continue
            self.debug("Imported %s", name, subject=name)
        self.error("huge error: [%d] %s", 1000, "Exit")


if __name__ == "__main__":
    importer = FileImporter()

    # Keep a copy of everything from INFO upwards in memory
    audit = io.StringIO()
    importer.add_sink(audit, level="INFO")

    importer.run(["a.csv", "b.tmp", "c.csv"])

    print("--- audit ---")
    print(audit.getvalue(), end="")
