from flownotes.storage.json_store import JsonRecordStore
from flownotes.storage.paths import NOTES, PDFS, DirectoryResolver

__all__ = ["NOTES", "PDFS", "DirectoryResolver", "JsonRecordStore"]
