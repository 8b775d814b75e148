"""Backend entrypoint. Starts uvicorn with port from env."""
import os
import uvicorn

from rebalancer.main import app


def main() -> None:
    port = int(os.environ.get("BACKEND_PORT", "8001"))
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
