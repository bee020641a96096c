"""Account endpoints: register, login, update."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_account_service
from api.schemas import LoginRequest, RegisterRequest, UpdateAccountRequest
from application.user.account_service import AccountService

router = APIRouter(tags=["accounts"])


@router.post("/register")
async def register(
    body: RegisterRequest, service: AccountService = Depends(get_account_service)
) -> Dict[str, Any]:
    error = await service.register(
        first_name=body.userFirstName,
        last_name=body.userLastName,
        email=body.userEmail,
        login=body.userLogin,
        password=body.userPassword,
    )
    return {"error": error}


@router.post("/login")
async def login(
    body: LoginRequest, service: AccountService = Depends(get_account_service)
) -> Dict[str, Any]:
    return await service.login(body.userLogin, body.userPassword)


@router.post("/updateaccount")
async def update_account(
    body: UpdateAccountRequest, service: AccountService = Depends(get_account_service)
) -> Dict[str, Any]:
    return await service.update_account(
        user_id=body.userId,
        first_name=body.userFirstName,
        last_name=body.userLastName,
        email=body.userEmail,
        login=body.userLogin,
        jwt_token=body.userJwt,
    )
