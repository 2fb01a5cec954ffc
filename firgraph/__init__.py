"""Circuit graph model for FIRRTL designs: kinds, expression trees, nodes and ordering."""

__version__ = "0.1.0"