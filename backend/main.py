"""
Thin entrypoint: re-export app from kyp_api.main for `uvicorn main:app`.
`python main.py` starts uvicorn on HOST:PORT from settings (default port 3001).
"""
import uvicorn

from kyp_api.core.config import settings
from kyp_api.main import app

__all__ = ["app"]


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
