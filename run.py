#!/usr/bin/env python3
"""Run script for payinstruct."""

import uvicorn

from payinstruct import config

if __name__ == "__main__":
    config.setup_logging()
    uvicorn.run(
        "payinstruct.api.app:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD
    )
