from .config import StateConfig, configure_logging, load_config
from .diff import compute_diff
from .store import TopologyStateManager

__all__ = ["StateConfig", "TopologyStateManager", "compute_diff", "configure_logging", "load_config"]
