"""Loading of collection entries from the content directory."""

from sitecontent.ingestion.base import ContentEntry, read_record
from sitecontent.ingestion.loader import EntryLoader

__all__ = ["ContentEntry", "EntryLoader", "read_record"]
