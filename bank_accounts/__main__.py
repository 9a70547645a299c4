"""Run the API server: python -m bank_accounts"""

import uvicorn

from bank_accounts.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bank_accounts.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
