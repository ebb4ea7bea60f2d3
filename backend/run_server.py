# run_server.py
import uvicorn
from app.core.config import settings
from app.main import app

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="127.0.0.1",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_keep_alive=5,
    )
