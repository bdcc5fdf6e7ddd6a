from .plotly_map import PlotlyMapWidget, clicked_key

__all__ = ["PlotlyMapWidget", "clicked_key"]
