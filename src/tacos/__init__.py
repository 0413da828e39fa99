"""tacos: size, token count and cost estimates for the files in a directory."""

__version__ = "0.2.0"
