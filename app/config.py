import os

from dotenv import load_dotenv

load_dotenv()

# Optional: without a key the AI insight feature is simply disabled
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL") or "gemini-2.5-flash"

LOG_LEVEL = os.getenv("LOG_LEVEL") or "INFO"
