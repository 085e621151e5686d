from fastapi import APIRouter, HTTPException, status

from cipher_suite.core.exceptions import EngineError, ValidationError
from cipher_suite.dependencies import SettingsDep
from cipher_suite.models.schemas import DecryptRequest, DecryptResponse, Direction, ErrorResponse
from cipher_suite.services.transform import transform

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    Playfair output is always upper-case; Caesar and Vigenère keep the
    case of the ciphertext.
    """
    try:
        plaintext = transform(
            request.cipher_type,
            Direction.DECRYPT,
            request.key,
            request.ciphertext,
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
            detail=f"Decryption failed: {e.message}",
        ) from e

    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        key_used=request.key,
    )
