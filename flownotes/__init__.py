"""Local JSON-file persistence for notes and PDF annotations."""
