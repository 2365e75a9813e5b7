# bookshop/main.py
import logging

from fastapi import FastAPI

from .catalog import shop_router
from .config import get_settings


settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(
    title="Second-hand book shop",
    description=(
        "Paginated catalogue of second-hand books and add-to-cart, "
        "refusing purchases of a seller's own listings."
    ),
    version="1.0.0",
)
app.include_router(shop_router)


# Liveness check
@app.get("/")
def health_check():
    return {"status": "ok"}
