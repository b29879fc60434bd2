import uvicorn

from animelog.core.config import get_settings


def main() -> None:
    uvicorn.run("animelog.main:app", host="0.0.0.0", port=get_settings().PORT)


if __name__ == "__main__":
    main()
