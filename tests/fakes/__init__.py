from tests.fakes.fake_note_store import FakeNoteStore
from tests.fakes.fake_pdf_store import FakePdfStore

__all__ = ["FakeNoteStore", "FakePdfStore"]
