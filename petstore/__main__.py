from __future__ import annotations

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "petstore.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
    )


if __name__ == "__main__":
    main()
