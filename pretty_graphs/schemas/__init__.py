# Pydantic schemas for chart options

# Import all schemas for easier access
from . import bar_chart

__all__ = [
    "bar_chart",
]
