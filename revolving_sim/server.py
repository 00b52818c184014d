"""Run the API and frontend host with uvicorn"""

import uvicorn

from revolving_sim.config import settings


def main() -> None:
    uvicorn.run(
        "revolving_sim.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
