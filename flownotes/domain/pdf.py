"""PDF document and annotation models."""

from flownotes.domain.common import FlowModel

KNOWN_ANNOTATION_TYPES = frozenset({"highlight", "comment", "drawing"})


class PdfAnnotation(FlowModel):
    """A mark placed on one page of a PDF.

    Attributes:
        id: Unique within the parent document.
        annotation_type: highlight, comment or drawing. Other tags are passed through.
        content: Optional text, e.g. the body of a comment.
        page: Page index. Whether it is zero- or one-based is up to the caller.
        rect: [x, y, width, height] in page-relative coordinates.
        color: Optional color string.
    """

    id: str
    annotation_type: str
    content: str | None = None
    page: int
    rect: tuple[float, float, float, float]
    color: str | None = None

    @property
    def is_known_type(self) -> bool:
        return self.annotation_type in KNOWN_ANNOTATION_TYPES


class PdfDocument(FlowModel):
    """A tracked PDF file with its annotations embedded.

    The file at `path` is not managed by the store; only this record is.
    """

    id: str
    name: str
    path: str
    pages: int
    created_at: str
    updated_at: str
    annotations: list[PdfAnnotation] | None = None

    def upsert_annotation(self, annotation: PdfAnnotation) -> None:
        """Replace the annotation with the same id in place, or append it."""
        if self.annotations is None:
            self.annotations = []
        for index, existing in enumerate(self.annotations):
            if existing.id == annotation.id:
                self.annotations[index] = annotation
                return
        self.annotations.append(annotation)
