"""
Special function for running the resume builder locally whenever required.

Simply run python run_server_local.py in the terminal to launch the server,
open the editor at `http://127.0.0.1:8001/` and the swagger UI at
`http://127.0.0.1:8001/docs`
"""
import signal
import sys
import threading
import webbrowser

import uvicorn

HOST = "127.0.0.1"
PORT = 8001


def main(open_browser: bool = True):
    # Use Uvicorn programmatically for proper cleanup on Ctrl+C
    config = uvicorn.Config(
        "api.server:app",       # points to the FastAPI app
        host=HOST,
        port=PORT,
        reload=False,           # session state is in memory only
    )
    server = uvicorn.Server(config)

    def handle_exit(sig, frame):
        print("\nShutting down gracefully...")
        # This triggers Uvicorn's graceful shutdown
        server.should_exit = True

    # Register signal handlers for graceful exit
    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    if open_browser:
        threading.Timer(0.8, webbrowser.open, args=(f"http://{HOST}:{PORT}/",)).start()

    server.run()
    print("Server stopped cleanly.")


if __name__ == "__main__":
    try:
        main(open_browser="--no-browser" not in sys.argv)
    except KeyboardInterrupt:
        print("\nKeyboard interrupt received. Exiting...")
        sys.exit(0)
