"""
Application entry point for the restaurant core API.

Loads the environment, configures logging and serves ``src.main:app``
with uvicorn.
"""

import uvicorn
from dotenv import load_dotenv

from src.utils.config import get_settings
from src.utils.logger import setup_logging

load_dotenv()

if __name__ == "__main__":
    setup_logging()
    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
