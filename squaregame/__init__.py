"""A small arcade game of coloured squares built on a scene graph, a screen stack and a menu GUI."""

__version__ = "0.1.0"