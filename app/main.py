# app/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.api.errors import request_validation_handler
from app.api.routes import router as api_router

app = FastAPI(title="SEO Text Optimizer")

# 400 with localized field messages instead of FastAPI's default 422
app.add_exception_handler(RequestValidationError, request_validation_handler)

app.include_router(api_router, prefix="/api")
