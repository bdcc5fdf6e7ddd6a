from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from philo_atlas.config.loader import load_global_config
from philo_atlas.core.dataset_loader import load_dataset_with_fallback
from philo_atlas.ui.callbacks.callbacks_filters import register_filter_callbacks
from philo_atlas.ui.callbacks.callbacks_modal import register_modal_callbacks
from philo_atlas.ui.callbacks.callbacks_render import register_render_callbacks
from philo_atlas.ui.config import AppConfig
from philo_atlas.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    config = load_global_config(config_root)

    # 2) Load the dataset once; a broken source falls back to the built-in sample
    dataset, used_fallback = load_dataset_with_fallback(config.data_source)
    logger.info(
        "Atlas dataset ready",
        extra={"dataset": dataset.name, "n_entries": len(dataset), "used_fallback": used_fallback},
    )

    # 3) App Context
    ctx = AppConfig(config=config, dataset=dataset, used_fallback=used_fallback)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        suppress_callback_exceptions=True,
    )
    app.title = config.ui_title

    # Rebuilt per page load so the footer date stays current
    app.layout = lambda: build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_modal_callbacks(app, ctx)

    return app
