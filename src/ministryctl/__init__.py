"""ministryctl — church ministry roster, birthday and meeting calendar tool."""

__version__ = "0.1.0"
