from flownotes.domain.note import KNOWN_BLOCK_TYPES, Block, Note, NoteMetadata
from flownotes.domain.pdf import KNOWN_ANNOTATION_TYPES, PdfAnnotation, PdfDocument

__all__ = [
    "KNOWN_ANNOTATION_TYPES",
    "KNOWN_BLOCK_TYPES",
    "Block",
    "Note",
    "NoteMetadata",
    "PdfAnnotation",
    "PdfDocument",
]
