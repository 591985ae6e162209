"""Run the Movies API with uvicorn: ``python -m api``."""

import uvicorn

from api.main import HOST, LOG_LEVEL, PORT, app

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
