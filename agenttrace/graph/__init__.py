"""Event call-graph correlation and rendering."""

from .correlator import highlight_pairs
from .dot import DotGraphRenderer, IGraphRenderer

__all__ = ["DotGraphRenderer", "IGraphRenderer", "highlight_pairs"]
