"""Building blocks for browsing video collections: options, trash, video filtering, tools, directories and clipboard entries."""

__version__ = "1.22.49"