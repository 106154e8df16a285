import os
from dotenv import load_dotenv


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    PORT = int(os.getenv("PORT", "10000"))

    # JioSaavn (API no documentada)
    SAAVN_API_URL = os.getenv("SAAVN_API_URL", "https://www.jiosaavn.com/api.php")
    SAAVN_TIMEOUT = float(os.getenv("SAAVN_TIMEOUT", "20"))

    # User-Agent fijo; si no se define se elige uno al arrancar (semilla opcional)
    SAAVN_USER_AGENT = os.getenv("SAAVN_USER_AGENT")
    SAAVN_USER_AGENT_SEED = os.getenv("SAAVN_USER_AGENT_SEED")
