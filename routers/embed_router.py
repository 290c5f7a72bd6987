from fastapi import APIRouter
from schemas.common_schema import ApiResponse
from schemas.embed_schema import EmbedResponse, EmbedValidateRequest
from services.embed import normalize_embed_url


router = APIRouter(prefix="/api/embeds", tags=["Embeds"])


@router.post("/validate", response_model=ApiResponse[EmbedResponse])
def validate(payload: EmbedValidateRequest):
    """Preview what an embed element would store for ``url``."""
    result = normalize_embed_url(payload.url)
    return ApiResponse(
        data=EmbedResponse(
            is_valid=result.is_valid,
            embed_url=result.embed_url,
            type=result.type,
            original_url=result.original_url,
            error=result.error,
        )
    )
