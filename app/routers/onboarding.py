from fastapi import APIRouter, Depends, status
from app.dependencies import get_storage
from app.schemas.client import OnboardingRequest, ClientResponse
from app.schemas.common import ApiResponse
from app.services import client_service
from app.storage import Storage
from app.core.logging_config import logger

router = APIRouter()


@router.post("/onboarding", response_model=ApiResponse[ClientResponse], status_code=status.HTTP_201_CREATED)
def onboard_client(
    data: OnboardingRequest,
    storage: Storage = Depends(get_storage)
):
    """
    Create a new client account from the onboarding form.
    
    Raises:
        ConstraintViolation (409): If the generated username is taken
    """
    logger.info(f"Onboarding client: business_name={data.business_name}, username={data.generated_username}")
    client = client_service.onboard(storage, data)
    logger.info(f"Client created successfully: id={client.id}")
    return ApiResponse.ok(ClientResponse.model_validate(client), "Client created successfully")
