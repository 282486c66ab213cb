from functools import cache
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from aes_demo.core.aes import AesCryptoService
from aes_demo.core.validation import DtoValidator
from aes_demo.features import DemoAesCommand, DemoAesCommandHandler
from aes_demo.models.requests import AesRequest, DemoAesRequest, DemoAesRequestRules
from aes_demo.models.responses import DemoAesResponse
from aes_demo.shared import Logger, load_config

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/api/v1/demo", tags=["demo"])

config = load_config()


@cache
def get_demo_aes_handler() -> DemoAesCommandHandler:
    return DemoAesCommandHandler(
        crypto_service=AesCryptoService[DemoAesRequest, DemoAesResponse](
            DemoAesRequest
        ),
        validator=DtoValidator[DemoAesRequest](DemoAesRequestRules),
        key=config.encryption.key,
    )


@router.post("", summary="demo endpoint")
async def demo_endpoint(
    request: AesRequest,
    handler: Annotated[DemoAesCommandHandler, Depends(get_demo_aes_handler)],
):
    """
    input: {"body": "hex(iv):hex(ciphertext)"} encrypted with the shared key
    decrypt -> {firstName, lastName}
    validate both names
    map onto the response model
    encrypt response -> {"body": ...}
    """
    response = await handler.handle(DemoAesCommand(request))
    if not response.success:
        logger.info("Demo request rejected (%d): %s", response.status_code, response.message)

    return JSONResponse(
        status_code=response.status_code,
        content=response.model_dump(mode="json", by_alias=True),
    )
