"""
Entry point: serve XQuery hints over stdio.

Set DEBUG to wait for a debugpy client on DEBUG_PORT (default 5678) first.
"""
import os
import sys

from xqueryls.lsp.server import create_server


def wait_for_debugger(port: int) -> None:
    try:
        import debugpy
    except ImportError:
        sys.exit("DEBUG is set but debugpy is missing; install xqueryls[dev]")

    debugpy.listen(("127.0.0.1", port))
    # stdout carries the protocol
    print(f"xqueryls: waiting for debugger on port {port}", file=sys.stderr)
    debugpy.wait_for_client()


def main():
    if os.getenv("DEBUG"):
        wait_for_debugger(int(os.getenv("DEBUG_PORT", "5678")))

    create_server().start_io()


if __name__ == "__main__":
    main()
