"""Run the API with uvicorn: `python -m blacklist_api`.

Host and port come from settings (HOST, PORT; port defaults to 3000).
"""

import uvicorn

from blacklist_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "blacklist_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
