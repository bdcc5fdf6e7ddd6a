import os
import socket

from philo_atlas.ui.dash_app import create_dash_app
from philo_atlas.logging_config import configure_logging

configure_logging()

app = create_dash_app(os.getenv("PHILO_ATLAS_CONFIG_ROOT", "config"))
server = app.server

PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, span: int = PORT_SEARCH_SPAN) -> int:
    """First port in [start_port, start_port + span) nobody listens on on localhost."""
    for port in range(start_port, start_port + span):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8051"))
    final_port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        print(f"Warning: Port {preferred_port} was taken. Starting on {final_port}")

    app.run(host="0.0.0.0", port=final_port, debug=debug)
