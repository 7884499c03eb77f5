"""Module entrypoint.

Allows:
    python -m syslog_conformance
"""

from __future__ import annotations

from syslog_conformance.server.log_server import main

if __name__ == "__main__":
    main()
