"""docker-ee-install - install Docker EE packages through the native package manager."""

__version__ = "0.1.0"
