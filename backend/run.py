import os
import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    uvicorn.run(
        "experience_calculator.api.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=port,
        log_level="info",
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
