from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from loguru import logger

from flownotes.api.schemas import CreateNoteRequest, ErrorDetail
from flownotes.domain.note import Note, NoteMetadata
from flownotes.domain.pdf import PdfAnnotation, PdfDocument
from flownotes.errors import FlowNotesError
from flownotes.note_store import NoteStore
from flownotes.pdf_store import PdfStore

STATUS_BY_KIND = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "invalid_id": status.HTTP_400_BAD_REQUEST,
    "parse": 422,
}


def to_http_error(error: FlowNotesError) -> HTTPException:
    """Turn a store failure into an HTTP error carrying its kind and a readable message."""
    status_code = STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    detail = ErrorDetail(error=error.kind, message=str(error))
    return HTTPException(status_code=status_code, detail=detail.model_dump())


def _id_mismatch(path_id: str, body_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=ErrorDetail(
            error="invalid_id",
            message=f"Path id {path_id!r} does not match body id {body_id!r}",
        ).model_dump(),
    )


def get_notes_router(*, note_store: NoteStore) -> APIRouter:
    router = APIRouter(prefix="/api/notes")

    @router.get("")
    def list_notes() -> List[NoteMetadata]:
        try:
            return note_store.list_notes()
        except FlowNotesError as e:
            logger.error(f"Error listing notes: {e}")
            raise to_http_error(e) from e

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_note(request: CreateNoteRequest) -> Note:
        try:
            return note_store.create_note(request.title)
        except FlowNotesError as e:
            logger.error(f"Error creating note {request.title!r}: {e}")
            raise to_http_error(e) from e

    @router.get("/{note_id}")
    def load_note(note_id: str) -> Note:
        try:
            return note_store.load_note(note_id)
        except FlowNotesError as e:
            logger.error(f"Error loading note {note_id}: {e}")
            raise to_http_error(e) from e

    @router.put("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
    def save_note(note_id: str, note: Note) -> Response:
        if note.id != note_id:
            raise _id_mismatch(note_id, note.id)
        try:
            note_store.save_note(note)
        except FlowNotesError as e:
            logger.error(f"Error saving note {note_id}: {e}")
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_note(note_id: str) -> Response:
        try:
            note_store.delete_note(note_id)
        except FlowNotesError as e:
            logger.error(f"Error deleting note {note_id}: {e}")
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def get_pdfs_router(*, pdf_store: PdfStore) -> APIRouter:
    router = APIRouter(prefix="/api/pdfs")

    @router.get("")
    def list_pdfs() -> List[PdfDocument]:
        try:
            return pdf_store.list_pdfs()
        except FlowNotesError as e:
            logger.error(f"Error listing PDFs: {e}")
            raise to_http_error(e) from e

    # Registered before /{pdf_id} so "import" is not taken for an id
    @router.post("/import", status_code=status.HTTP_201_CREATED)
    def import_pdf() -> PdfDocument:
        try:
            return pdf_store.import_pdf()
        except FlowNotesError as e:
            logger.error(f"Error importing PDF: {e}")
            raise to_http_error(e) from e

    @router.get("/{pdf_id}")
    def load_pdf(pdf_id: str) -> PdfDocument:
        try:
            return pdf_store.load_pdf(pdf_id)
        except FlowNotesError as e:
            logger.error(f"Error loading PDF {pdf_id}: {e}")
            raise to_http_error(e) from e

    @router.put("/{pdf_id}", status_code=status.HTTP_204_NO_CONTENT)
    def save_pdf(pdf_id: str, pdf: PdfDocument) -> Response:
        if pdf.id != pdf_id:
            raise _id_mismatch(pdf_id, pdf.id)
        try:
            pdf_store.save_pdf(pdf)
        except FlowNotesError as e:
            logger.error(f"Error saving PDF {pdf_id}: {e}")
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{pdf_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_pdf(pdf_id: str) -> Response:
        try:
            pdf_store.delete_pdf(pdf_id)
        except FlowNotesError as e:
            logger.error(f"Error deleting PDF {pdf_id}: {e}")
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.put("/{pdf_id}/annotations", status_code=status.HTTP_204_NO_CONTENT)
    def save_pdf_annotation(pdf_id: str, annotation: PdfAnnotation) -> Response:
        try:
            pdf_store.save_annotation(pdf_id, annotation)
        except FlowNotesError as e:
            logger.error(f"Error saving annotation {annotation.id} on PDF {pdf_id}: {e}")
            raise to_http_error(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
