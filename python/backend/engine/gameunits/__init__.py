from backend.engine.gameunits.connectivity import (
    ConnectivityReport,
    aligned,
    merge_aligned,
    reconnect,
    split_detached,
)

__all__ = [
    "ConnectivityReport",
    "aligned",
    "merge_aligned",
    "reconnect",
    "split_detached",
]
