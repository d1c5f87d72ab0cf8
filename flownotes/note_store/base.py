from typing import List, Protocol

from flownotes.domain.note import Note, NoteMetadata


class NoteStore(Protocol):
    """Protocol for note storage implementations."""

    def create_note(self, title: str) -> Note:
        """Create and persist a new note with a unique title and one heading block."""
        ...

    def save_note(self, note: Note) -> None:
        """Store the note, replacing any previous version with the same ID."""
        ...

    def load_note(self, note_id: str) -> Note:
        """Get a note by its ID. Raises NotFoundError if it does not exist."""
        ...

    def list_notes(self) -> List[NoteMetadata]:
        """Get metadata for all notes, most recently updated first."""
        ...

    def delete_note(self, note_id: str) -> None:
        """Delete a note. Deleting a missing note is not an error."""
        ...
