"""
Dash web UI for the atlas.

create_dash_app() wires config, dataset, layout and callbacks together.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
