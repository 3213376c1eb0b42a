"""Weather Watcher Alexa skill backend."""

__version__ = "0.1.0"
