from .loader import load_global_config
from .model import AtlasConfig, MapConfig, RegionStyles

__all__ = ["AtlasConfig", "MapConfig", "RegionStyles", "load_global_config"]
