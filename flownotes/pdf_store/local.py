import uuid
from operator import attrgetter
from typing import List

from loguru import logger

from flownotes.domain.common import later_timestamp, now_timestamp
from flownotes.domain.pdf import PdfAnnotation, PdfDocument
from flownotes.pdf_store.base import PdfStore
from flownotes.storage.json_store import JsonRecordStore
from flownotes.storage.paths import PDFS, DirectoryResolver

PLACEHOLDER_NAME = "Sample PDF"
PLACEHOLDER_PATH = "/path/to/sample.pdf"


class LocalPdfStore(JsonRecordStore[PdfDocument], PdfStore):
    """PDF store that keeps each document, annotations included, in its own JSON file."""

    record_type = PdfDocument
    record_label = "PDF"
    store_name = PDFS

    def __init__(self, resolver: DirectoryResolver) -> None:
        super().__init__(resolver)

    def import_pdf(self) -> PdfDocument:
        """Create a placeholder document record.

        Not yet wired to a file picker: the name, path and page count are fixed
        placeholders until the frontend supplies a real file.
        """
        now = now_timestamp()
        pdf = PdfDocument(
            id=f"pdf_{now}_{uuid.uuid4().hex[:8]}",
            name=PLACEHOLDER_NAME,
            path=PLACEHOLDER_PATH,
            pages=1,
            created_at=now,
            updated_at=now,
            annotations=[],
        )
        self.save_pdf(pdf)
        logger.info(f"Imported placeholder PDF {pdf.id}")
        return pdf

    def save_pdf(self, pdf: PdfDocument) -> None:
        with self.lock(pdf.id):
            self.write(pdf)

    def load_pdf(self, pdf_id: str) -> PdfDocument:
        return self.read(pdf_id)

    def list_pdfs(self) -> List[PdfDocument]:
        pdfs = self.scan()
        pdfs.sort(key=attrgetter("updated_at"), reverse=True)
        return pdfs

    def delete_pdf(self, pdf_id: str) -> None:
        with self.lock(pdf_id):
            if self.remove(pdf_id):
                logger.info(f"Deleted PDF {pdf_id}")

    def save_annotation(self, pdf_id: str, annotation: PdfAnnotation) -> None:
        """Upsert `annotation` into the document and bump its `updated_at` (never backwards).

        Raises NotFoundError, without writing anything, if the document does not exist.
        """
        with self.lock(pdf_id):
            pdf = self.load_pdf(pdf_id)
            pdf.upsert_annotation(annotation)
            pdf.updated_at = later_timestamp(pdf.updated_at, now_timestamp())
            self.save_pdf(pdf)
        logger.debug(f"Saved annotation {annotation.id} on PDF {pdf_id}")
