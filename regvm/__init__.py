"""An interpreter for a small register-machine assembly language."""

__version__ = "0.5.0"
__all__ = ["errors", "simulator", "parser", "operation", "interpreter"]