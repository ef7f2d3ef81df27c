"""Search request and response models."""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class QueryTarget:
    """A query ready to be sent to Solr."""

    token: str
    url: str


class SearchDocument(BaseModel):
    """Single document from the Solr ``response.docs`` array."""

    docid: int
    doctitle: list[str] = Field(min_length=1)
    body: list[str] = Field(min_length=1)

    @property
    def question(self) -> str:
        return f"Question: {self.doctitle[0]}"

    @property
    def answer(self) -> str:
        return f"Answer: {self.body[0]}"
