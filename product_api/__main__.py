"""
Run the API with uvicorn: ``python -m product_api``
"""
import uvicorn

from product_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "product_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
