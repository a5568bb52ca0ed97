import logging

from fastapi import FastAPI

from homeservices.api.v1.storefront import router as storefront_router
from homeservices.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "view",
            "vertical",
            "service",
            "booking_id",
            "phase",
            "fallback",
            "method",
            "path",
            "status",
            "attempt",
            "base_url",
            "reason",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Home Services Storefront", version="1.0.0")

app.include_router(storefront_router, prefix="/api/v1", tags=["storefront"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
