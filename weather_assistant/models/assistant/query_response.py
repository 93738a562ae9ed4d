from pydantic import BaseModel, Field


class QueryResponse(BaseModel):
    response: str = Field(..., description="Answer for the user")
    query: str = Field(..., description="Query that was answered")
    processing_time: float = Field(..., ge=0, description="Seconds spent answering")
