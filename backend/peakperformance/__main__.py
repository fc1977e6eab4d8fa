"""
Run the PeakPerformance backend with uvicorn.

Usage:
    python -m peakperformance

Host and port come from BACKEND_HOST / BACKEND_PORT (defaults 0.0.0.0:3001).
"""

import uvicorn

from peakperformance.config import settings


def main() -> None:
    uvicorn.run(
        "peakperformance.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
