"""Classic design patterns, each shown through a small hiring scenario with a runnable main()."""

__version__ = "0.1.0"