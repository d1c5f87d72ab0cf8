from pydantic import BaseModel


class CreateNoteRequest(BaseModel):
    title: str


class ErrorDetail(BaseModel):
    error: str
    message: str
