import sys

from loguru import logger

from flownotes.api import create_app
from flownotes.config import settings
from flownotes.note_store.local import LocalNoteStore
from flownotes.pdf_store.local import LocalPdfStore
from flownotes.storage.paths import DirectoryResolver

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

resolver = DirectoryResolver(data_dir=settings.data_dir, app_dir_name=settings.app_dir_name)
logger.info(f"Storing notes and PDFs under {resolver.root}")

note_store = LocalNoteStore(resolver)
pdf_store = LocalPdfStore(resolver)
app = create_app(note_store=note_store, pdf_store=pdf_store)
