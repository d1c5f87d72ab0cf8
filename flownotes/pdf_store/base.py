from typing import List, Protocol

from flownotes.domain.pdf import PdfAnnotation, PdfDocument


class PdfStore(Protocol):
    """Protocol for PDF document storage implementations."""

    def import_pdf(self) -> PdfDocument:
        """Create and persist a new PDF document record."""
        ...

    def save_pdf(self, pdf: PdfDocument) -> None:
        """Store the document, replacing any previous version with the same ID."""
        ...

    def load_pdf(self, pdf_id: str) -> PdfDocument:
        """Get a document by its ID. Raises NotFoundError if it does not exist."""
        ...

    def list_pdfs(self) -> List[PdfDocument]:
        """Get all documents, most recently updated first."""
        ...

    def delete_pdf(self, pdf_id: str) -> None:
        """Delete a document. Deleting a missing document is not an error."""
        ...

    def save_annotation(self, pdf_id: str, annotation: PdfAnnotation) -> None:
        """Add an annotation to a document, replacing one with the same ID."""
        ...
