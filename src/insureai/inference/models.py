from pydantic import BaseModel, ConfigDict, Field


class InferenceRequest(BaseModel):
    """Request body sent to the remote inference endpoint."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="The user's raw input")
    context: str = Field(description="Instruction string describing assistant behavior")


class InferenceResponse(BaseModel):
    """Response from the remote inference endpoint.

    `response` may be missing or empty; callers treat that as an invalid
    reply rather than a success.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    response: str | None = Field(default=None, description="Generated reply text")
    model: str | None = Field(default=None, description="Model that produced the reply, if known")

    @property
    def has_reply(self) -> bool:
        return bool(self.response)
