"""Tokenizer and combinator parser for SimulationCraft action priority lists."""

__version__ = "0.1.0"