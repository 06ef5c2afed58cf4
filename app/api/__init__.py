"""API routes package."""

from fastapi import APIRouter

from app.api.routes import items, notifications

api_router = APIRouter()

# Rutas sin prefijo: los clientes existentes usan /items, /item/{id}, ...
api_router.include_router(items.router, tags=["Items"])
api_router.include_router(notifications.router, tags=["Notifications"])
