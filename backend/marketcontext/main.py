import logging

from fastapi import FastAPI

from marketcontext.api.routes import router
from marketcontext.config.settings import settings

logging.basicConfig(level=settings.logging.level, format=settings.logging.format)

app = FastAPI(title="marketcontext")
app.include_router(router)
