"""semrag - question answering over uploaded documents with semantic chunking."""

__version__ = "0.1.0"
