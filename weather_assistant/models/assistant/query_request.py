from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1, description="Natural language weather query")
    origin: str = Field(default="api", description="Session or chat the query came from")
