"""
Run the server: python -m tracklog

Host and port come from Settings (HOST / PORT).
"""

import uvicorn

from tracklog.config import Settings
from tracklog.main import create_app


def main() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
