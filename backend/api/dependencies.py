"""FastAPI dependencies: services built in the app lifespan."""

from fastapi import Request

from application.diary.service import DiaryService
from application.user.account_service import AccountService
from application.user.card_service import CardService
from infrastructure.external_apis.usda.client import USDAClient


def get_diary_service(request: Request) -> DiaryService:
    return request.app.state.diary_service


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_card_service(request: Request) -> CardService:
    return request.app.state.card_service


def get_usda_client(request: Request) -> USDAClient:
    return request.app.state.usda_client
