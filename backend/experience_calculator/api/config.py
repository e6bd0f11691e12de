import os

DATA_DIR = os.getenv("DATA_DIR", "/app/data")
OUTPUTS_BASE = os.path.join(DATA_DIR, "outputs")
os.makedirs(OUTPUTS_BASE, exist_ok=True)

REPORT_TITLE = os.getenv("REPORT_TITLE", "Experience Calculator")
REPORT_BASENAME = "experience"

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",") if o.strip()]

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", 1024 * 1024))
