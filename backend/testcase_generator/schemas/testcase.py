from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ChatRole = Literal["system", "user"]


class TestCaseRequest(BaseModel):
    """
    Inbound body for POST /generate-testcases.

    An empty prompt is accepted and forwarded as-is; only a missing or
    null prompt is rejected.
    """

    prompt: str = Field(
        ...,
        description="Natural-language requirement or user story to generate test cases for.",
    )


class TestCaseResponse(BaseModel):
    """
    Response envelope. Generation failures are reported through ``success``,
    never through the HTTP status code.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    test_cases: str = Field(..., alias="testCases")


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class ChatCompletionPayload(BaseModel):
    """Body of the outbound chat-completion request."""

    model: str
    max_tokens: int
    temperature: float
    messages: List[ChatMessage]

    @field_validator("messages")
    @classmethod
    def _system_then_user(cls, value: List[ChatMessage]) -> List[ChatMessage]:
        roles = [m.role for m in value]
        if roles != ["system", "user"]:
            raise ValueError(f"messages must be [system, user], got {roles}")
        return value
