from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    valid: bool
    citation: str
    normalized: Optional[str] = None
    document_id: Optional[str] = None
    document_title: Optional[str] = None
    provision_ref: Optional[str] = None
    status: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


class ResolveResult(BaseModel):
    reference: str
    document_id: Optional[str] = None
    found: bool = False


class ResponseMetadata(BaseModel):
    data_source: str
    jurisdiction: str
    disclaimer: str
    freshness: Optional[str] = None
