"""KSUID Service - Entry Point."""

from config import load_config
from ui.app import create_app

config = load_config()
app = create_app(config)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host=config.server.host, port=config.server.port)
