from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

class AnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional so a missing image reaches the service and gets the 400 message
    image: Optional[str] = None
    context: str = ""
    skill: str = ""
    step_title: str = Field("", alias="stepTitle")
    require_validation: bool = Field(False, alias="requireValidation")
    attempts: Optional[int] = None

    @field_validator("context", "skill", "step_title", mode="before")
    @classmethod
    def null_text_as_empty(cls, value):
        return "" if value is None else value

class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    feedback: str
    skill: str
    timestamp: datetime
    is_approved: Optional[bool] = Field(None, alias="isApproved")
    confidence: Optional[float] = None

class ErrorResponse(BaseModel):
    error: str
