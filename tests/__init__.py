"""Test suite for fsseam.

Test Structure:
- unit/io/: FileSystem implementations (fake, real, sync wrappers)
- unit/importers/: Dealership model and importer, run against the fake
- unit/config/: Config loading through FileSystemSync
- unit/cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
