import os
from pathlib import Path
from dotenv import load_dotenv

def load_config():
    # 1) Load base .env first (doesn't override anything already set by the OS)
    load_dotenv(".env", override=False)

    # 2) Read APP_ENV (now present if it was only in .env)
    env = os.getenv("APP_ENV", "dev").lower()
    env_path = Path(f".env.{env}")

    # 3) The env-specific file is optional here; when present it overrides base/OS
    if env_path.exists():
        load_dotenv(env_path, override=True)


load_config()
