"""Flutter Blueprint: scaffolding generator for Flutter starter apps."""

__version__ = "1.0.0"
