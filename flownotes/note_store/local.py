import uuid
from operator import attrgetter
from typing import List

from loguru import logger

from flownotes.domain.common import now_timestamp
from flownotes.domain.note import Block, Note, NoteMetadata
from flownotes.note_store.base import NoteStore
from flownotes.storage.json_store import JsonRecordStore
from flownotes.storage.paths import NOTES, DirectoryResolver

DEFAULT_HEADING = "Untitled"


class LocalNoteStore(JsonRecordStore[Note], NoteStore):
    """Note store that keeps each note in its own JSON file.

    Nothing is cached: every call goes back to the notes directory.
    """

    record_type = Note
    record_label = "Note"
    store_name = NOTES

    def __init__(self, resolver: DirectoryResolver) -> None:
        super().__init__(resolver)

    def create_note(self, title: str) -> Note:
        """Create a note titled `title`, or `title 1`, `title 2`, ... if taken.

        Titles are checked against a listing taken just before the write, so two
        concurrent creates with the same title may still end up sharing it.
        """
        now = int(now_timestamp())
        existing_titles = {note.title for note in self.list_notes()}
        final_title = title
        counter = 1
        while final_title in existing_titles:
            final_title = f"{title} {counter}"
            counter += 1

        note = Note(
            id=f"note_{now}_{uuid.uuid4().hex[:8]}",
            title=final_title,
            blocks=[
                Block(
                    id=f"block_{now + 1}_{uuid.uuid4().hex[:8]}",
                    type="heading",
                    content=DEFAULT_HEADING,
                    order=0,
                )
            ],
            created_at=str(now),
            updated_at=str(now),
        )
        self.save_note(note)
        logger.info(f"Created note {note.id} titled {final_title!r}")
        return note

    def save_note(self, note: Note) -> None:
        with self.lock(note.id):
            self.write(note)

    def load_note(self, note_id: str) -> Note:
        return self.read(note_id)

    def list_notes(self) -> List[NoteMetadata]:
        notes = [note.metadata() for note in self.scan()]
        # Plain string comparison; ties keep directory order
        notes.sort(key=attrgetter("updated_at"), reverse=True)
        return notes

    def delete_note(self, note_id: str) -> None:
        with self.lock(note_id):
            if self.remove(note_id):
                logger.info(f"Deleted note {note_id}")
