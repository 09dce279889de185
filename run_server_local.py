"""
Special function for running the generator server locally whenever required.

Simply run python run_server_local.py in the terminal to launch the server
and begin hosting the swagger UI at `http://0.0.0.0:3000/docs`.
HOST and PORT can be overridden from the environment (or .env).
"""
import os
import signal
import sys

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def main():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))

    config = uvicorn.Config(
        "api.server:app",
        host=host,
        port=port,
        reload=True
    )
    server = uvicorn.Server(config)

    def handle_exit(sig, frame):
        print("\nShutting down gracefully...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    print(f"CV Site Generator listening on http://{host}:{port}")
    server.run()
    print("Server stopped cleanly.")

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nKeyboard interrupt received. Exiting...")
        sys.exit(0)
