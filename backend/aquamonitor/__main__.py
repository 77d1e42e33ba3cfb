import uvicorn

from aquamonitor.core import settings


def main() -> None:
    uvicorn.run("aquamonitor.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
