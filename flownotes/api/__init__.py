from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flownotes.api.endpoints import get_notes_router, get_pdfs_router
from flownotes.config import settings
from flownotes.note_store import NoteStore
from flownotes.pdf_store import PdfStore


def create_app(
    *,
    note_store: NoteStore,
    pdf_store: PdfStore,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI(title="Flow Notes")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    app.include_router(router=get_notes_router(note_store=note_store))
    app.include_router(router=get_pdfs_router(pdf_store=pdf_store))

    return app
