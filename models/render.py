"""Request/response bodies for the POST /selectors/render endpoint."""

from pydantic import BaseModel, ConfigDict

from models.selector_spec import SelectorSpec


class RenderRequest(BaseModel):
    """Selector description to render. Extra fields are rejected with a 422."""

    model_config = ConfigDict(extra="forbid")

    selector: SelectorSpec


class RenderResponse(BaseModel):
    selector: str
