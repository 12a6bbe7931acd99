# vinoteca/main.py
import logging

from fastapi import FastAPI

from .catalog import catalog_router
from .catalog.store import get_catalog
from .config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)

# A malformed catalogue must stop the process here, before serving anything.
get_catalog()

app = FastAPI(
    title="VinoExquisito",
    description=(
        "Catálogo de vinos de la tienda: filtros por tipo de vino, "
        "ordenación por precio o valoración y tablas estáticas de la portada."
    ),
    version="1.0.0",
)


# 🔹 Health check
@app.get("/")
def health_check():
    return {"status": "ok", "env": settings.APP_ENV}


app.include_router(catalog_router)
