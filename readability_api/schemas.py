from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel, Field

class ErrorKind(str, Enum):
    FETCH_FAILURE = "FETCH_FAILURE"
    PARSE_FAILURE = "PARSE_FAILURE"

class ExtractSuccess(BaseModel):
    status: Literal["success"] = "success"
    title: str
    content: str = Field(description="Article content rendered as HTML")

class ExtractFailure(BaseModel):
    status: Literal["fail"] = "fail"
    error: ErrorKind
    detail: str = Field(description="Human readable error, e.g. 'Error: timed out'")

ApiResponse = Union[ExtractSuccess, ExtractFailure]
