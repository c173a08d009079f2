import loader  # Loads all environment variables from correct .env file

from portal.app import application as app
from portal.core.config import get_settings

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
