"""Machine Agent: an HTTP service that runs shell commands on its host."""

__version__ = "1.0.0"
