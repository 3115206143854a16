"""
Run the StockSense backend server.
"""
import os

# Load environment
from dotenv import load_dotenv

backend_dir = os.path.dirname(os.path.abspath(__file__))
load_dotenv(os.path.join(backend_dir, ".env"))

# Run uvicorn
import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    print("Starting StockSense Backend Server...")
    print(f"API Docs: http://{settings.host}:{settings.port}/docs")
    print("-" * 50)

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
