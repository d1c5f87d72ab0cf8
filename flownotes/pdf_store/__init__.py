from flownotes.pdf_store.base import PdfStore

__all__ = ["PdfStore"]
