from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from flownotes.api import create_app
from flownotes.domain.note import Block, Note
from flownotes.domain.pdf import PdfAnnotation, PdfDocument
from flownotes.note_store.local import LocalNoteStore
from flownotes.pdf_store.local import LocalPdfStore
from flownotes.storage.paths import DirectoryResolver
from tests.fakes import FakeNoteStore, FakePdfStore


@pytest.fixture
def sample_note() -> Note:
    return Note(
        id="note_1700000000",
        title="Reading list",
        blocks=[
            Block(id="block_1", type="heading", content="Reading list", order=0),
            Block(
                id="block_2",
                type="todo",
                content="Finish chapter 3",
                checked=False,
                order=2,
                children=[
                    Block(id="block_3", type="text", content="Take notes", order=0),
                ],
            ),
            Block(id="block_4", type="pdf", content="", file_path="/docs/paper.pdf", order=1),
        ],
        created_at="1700000000",
        updated_at="1700000100",
        tags=["books", "todo"],
    )


@pytest.fixture
def sample_pdf() -> PdfDocument:
    return PdfDocument(
        id="pdf_1700000000",
        name="paper.pdf",
        path="/docs/paper.pdf",
        pages=12,
        created_at="1700000000",
        updated_at="1700000000",
        annotations=[
            PdfAnnotation(
                id="a1",
                annotation_type="highlight",
                page=1,
                rect=(10.0, 20.0, 100.0, 12.5),
                color="#ffff00",
            ),
        ],
    )


@pytest.fixture
def sample_annotation() -> PdfAnnotation:
    return PdfAnnotation(
        id="c1",
        annotation_type="comment",
        content="Check this claim",
        page=3,
        rect=(0.1, 0.2, 0.3, 0.4),
    )


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Stands in for the platform's user data directory."""
    return tmp_path / "data"


@pytest.fixture
def resolver(data_dir: Path) -> DirectoryResolver:
    return DirectoryResolver(data_dir=data_dir)


@pytest.fixture
def note_store(resolver: DirectoryResolver) -> LocalNoteStore:
    return LocalNoteStore(resolver)


@pytest.fixture
def pdf_store(resolver: DirectoryResolver) -> LocalPdfStore:
    return LocalPdfStore(resolver)


@pytest.fixture
def fake_note_store(sample_note: Note) -> FakeNoteStore:
    return FakeNoteStore({sample_note.id: sample_note})


@pytest.fixture
def fake_pdf_store(sample_pdf: PdfDocument) -> FakePdfStore:
    return FakePdfStore({sample_pdf.id: sample_pdf})


@pytest.fixture
def test_client(fake_note_store: FakeNoteStore, fake_pdf_store: FakePdfStore) -> TestClient:
    """Create test client with fake stores."""
    app = create_app(note_store=fake_note_store, pdf_store=fake_pdf_store)
    return TestClient(app)


@pytest.fixture
def local_client(note_store: LocalNoteStore, pdf_store: LocalPdfStore) -> TestClient:
    """Create test client backed by the real stores in a temporary directory."""
    app = create_app(note_store=note_store, pdf_store=pdf_store)
    return TestClient(app)
