from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional, Tuple

class GenerationRequest(BaseModel):
    """Validated business description. Built only by core.validator.validate_input."""
    model_config = ConfigDict(frozen=True)

    name: str
    industry: str
    audience: str
    color: Optional[str] = None
    sections: Tuple[str, ...] = ()

class GenerateResponse(BaseModel):
    code: str
    degraded: bool = False
    notice: Optional[str] = None
    source: Literal["remote", "local"] = "remote"
    message: str = "Website generated successfully"
