from fastapi import Depends, Request

from backend.app.config import AppConfig
from backend.app.services.path_service import PathService


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_path_service(config: AppConfig = Depends(get_config)) -> PathService:
    # A fresh service per request; graphs never outlive the request.
    return PathService(config.synthesis)
