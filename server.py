import copy
import socket
from typing import Optional

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from greeter.config import Settings
from greeter.main import app

BACKLOG = 2048

# stdout carries only the startup line; the access log goes to stderr.
LOG_CONFIG = copy.deepcopy(LOGGING_CONFIG)
LOG_CONFIG["handlers"]["access"]["stream"] = "ext://sys.stderr"


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``.

    A port that is taken or otherwise unbindable raises ``OSError``; nothing
    retries, so the process dies before it ever reports itself listening.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    sock = bind_listener(settings.host, settings.port)
    print(f"App listening on port {settings.port}", flush=True)
    server = uvicorn.Server(uvicorn.Config(app, log_level="info", log_config=LOG_CONFIG))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    run()
