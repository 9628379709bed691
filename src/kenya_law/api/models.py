from typing import Optional
from pydantic import BaseModel, Field

from kenya_law import config
from kenya_law.citations.formatter import CitationFormat


class ValidateCitationRequest(BaseModel):
    citation: str = Field(max_length=config.MAX_CITATION_LENGTH)


class FormatCitationRequest(BaseModel):
    citation: str = Field(max_length=config.MAX_CITATION_LENGTH)
    format: Optional[CitationFormat] = 'full'


class ResolveDocumentRequest(BaseModel):
    reference: str = Field(max_length=config.MAX_CITATION_LENGTH)
