from fastapi import APIRouter, Depends

from app.application.use_cases.script_generate import GenerateScriptUseCase
from app.core.exceptions import unexpected_errors_as
from app.presentation.api.v1.dependencies.ad import get_generate_script_use_case
from app.presentation.api.v1.schemas.ad import ScriptRequest, ScriptResponse

router = APIRouter(tags=["script"])


@router.post("/script", response_model=ScriptResponse)
async def generate_script(
    payload: ScriptRequest,
    use_case: GenerateScriptUseCase = Depends(get_generate_script_use_case),
):
    """Draft a UGC ad script for a product. Provider errors pass through."""
    with unexpected_errors_as("Script generation"):
        script = await use_case.execute(payload.product)
    return ScriptResponse(script=script)
