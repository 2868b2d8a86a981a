"""Convert Dendron vaults to Logseq graphs."""

__version__ = "0.1.0"
