"""Importers that consume the fsseam.core.io FileSystem protocol."""

from fsseam.core.importers.dealerships import DealershipImporter, DealershipImporterSync
from fsseam.core.importers.models import Dealership, DealershipParseError

__all__ = [
    "Dealership",
    "DealershipImporter",
    "DealershipImporterSync",
    "DealershipParseError",
]
