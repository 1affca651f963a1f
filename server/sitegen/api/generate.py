# sitegen/api/generate.py
import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query

from sitegen.core.codegen_agent import generate
from sitegen.core.errors import ValidationError
from sitegen.models import GenerateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=GenerateResponse)
async def generate_website(payload: Any = Body(None),
                           local: bool = Query(False, description="Render the local template, skip the backend"),
                           debug: bool = Query(False)):
    """
    Generate website code for a business description.

    Body: {"name", "industry", "audience", "color"?, "sections": [...]}
    Response: {"code", "degraded", "notice", "source", "message"}
    A degraded response carries template code plus a notice explaining why.
    """
    options = {"debug": debug}
    if local:
        options["local"] = True
    try:
        return await generate(payload, options)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Generation failed")
        raise HTTPException(status_code=500, detail=str(e))
