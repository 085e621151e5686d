from fastapi import APIRouter

from cipher_suite.models.schemas import CipherFamily, CipherInfo
from cipher_suite.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description=(
        "List the available ciphers grouped by family, with the kind of key "
        "each one takes."
    ),
)
async def list_ciphers() -> list[CipherInfo]:
    infos = []
    for family in CipherFamily:
        for engine_class in EngineRegistry.get_engines_by_family(family):
            infos.append(CipherInfo(
                cipher_type=engine_class.cipher_type,
                name=engine_class.name,
                cipher_family=family,
                key_kind=engine_class.key_kind,
                aliases=engine_class.cipher_type.aliases,
                description=engine_class.description,
            ))
    return infos
