"""Note domain models."""

from flownotes.domain.common import FlowModel

KNOWN_BLOCK_TYPES = frozenset(
    {"text", "heading", "todo", "list", "divider", "image", "pdf", "code"}
)


class Block(FlowModel):
    """A node in a note's content tree.

    Attributes:
        id: Unique identifier, supplied by the caller.
        type: Block kind. Open-ended; tags outside KNOWN_BLOCK_TYPES are kept as-is.
        content: Raw text of the block.
        checked: Completion state, only meaningful for todo blocks.
        file_path: Referenced file, only meaningful for file blocks.
        children: Nested blocks, None for a leaf.
        order: Sort key among siblings, ascending. Need not be contiguous.
    """

    id: str
    type: str
    content: str
    checked: bool | None = None
    file_path: str | None = None
    children: list["Block"] | None = None
    order: int

    @property
    def is_known_type(self) -> bool:
        return self.type in KNOWN_BLOCK_TYPES

    def sorted_children(self) -> list["Block"]:
        return sorted(self.children or [], key=lambda b: b.order)


class NoteMetadata(FlowModel):
    """A note without its blocks, as returned when listing."""

    id: str
    title: str
    created_at: str
    updated_at: str
    tags: list[str] | None = None
    folder_id: str | None = None


class Note(FlowModel):
    """A document made of an ordered tree of blocks.

    Timestamps are Unix seconds encoded as strings. The id doubles as the
    storage filename stem and never changes.
    """

    id: str
    title: str
    blocks: list[Block]
    created_at: str
    updated_at: str
    tags: list[str] | None = None
    folder_id: str | None = None

    def sorted_blocks(self) -> list[Block]:
        return sorted(self.blocks, key=lambda b: b.order)

    def metadata(self) -> NoteMetadata:
        return NoteMetadata.model_validate(self.model_dump(exclude={"blocks"}))
