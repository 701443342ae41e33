"""docsnap - flatten versioned documentation trees into LLM-ready bundles."""

__version__ = "0.1.0"
