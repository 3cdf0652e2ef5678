"""Server Runner — `python -m car_shop` starts uvicorn on the configured address.

Invariants:
    - An inherited socket (LISTEN_FDS from systemfd or a systemd-style
      supervisor) takes precedence over binding host:port
    - LISTEN_PID, when set, must name this process

Design Decisions:
    - Inherited sockets let a file watcher restart the process without
      dropping connections during development
"""

import logging
import os
from typing import Mapping

import uvicorn

from car_shop.config import get_settings

logger = logging.getLogger(__name__)

SD_LISTEN_FDS_START = 3


def inherited_socket_fd(
    environ: Mapping[str, str] | None = None, pid: int | None = None,
) -> int | None:
    """First socket fd passed by a supervisor, or None when nothing was passed."""
    environ = os.environ if environ is None else environ
    pid = os.getpid() if pid is None else pid
    listen_pid = environ.get("LISTEN_PID")
    if listen_pid and listen_pid != str(pid):
        return None
    try:
        count = int(environ.get("LISTEN_FDS", "0"))
    except ValueError:
        logger.warning(f"Ignoring malformed LISTEN_FDS={environ.get('LISTEN_FDS')!r}")
        return None
    return SD_LISTEN_FDS_START if count > 0 else None


def main() -> None:
    settings = get_settings()
    fd = inherited_socket_fd()
    if fd is not None:
        uvicorn.run("car_shop.main:app", fd=fd, log_config=None)
    else:
        uvicorn.run(
            "car_shop.main:app",
            host=settings.host,
            port=settings.port,
            log_config=None,
        )


if __name__ == "__main__":
    main()
