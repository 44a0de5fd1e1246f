"""
Penpot Stack Controller - application entry point.

Builds the FastAPI app from environment configuration and serves it with
uvicorn on a Unix domain socket (see `penpot_stack_controller.server`).
"""
from penpot_stack_controller.server import main

if __name__ == "__main__":
    main()
