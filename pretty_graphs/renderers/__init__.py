# SVG renderers, one module per chart kind

# Import all renderers for easier access
from . import bar_chart

__all__ = [
    "bar_chart",
]
