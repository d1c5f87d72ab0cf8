from flownotes.note_store.base import NoteStore

__all__ = ["NoteStore"]
