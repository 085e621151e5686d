from fastapi import APIRouter, HTTPException, status

from cipher_suite.core.exceptions import EngineError, ValidationError
from cipher_suite.dependencies import SettingsDep
from cipher_suite.models.schemas import Direction, EncryptRequest, EncryptResponse, ErrorResponse
from cipher_suite.services.transform import transform

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        500: {"model": ErrorResponse, "description": "Encryption failed"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    The key must have the cipher's natural form: an integer shift for
    Caesar, a keyword string for Vigenère and Playfair.
    """
    try:
        ciphertext = transform(
            request.cipher_type,
            Direction.ENCRYPT,
            request.key,
            request.plaintext,
            max_length=settings.max_text_length,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except EngineError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {e.message}",
        ) from e

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=request.key,
    )
