"""
newsdigest – newsletter archive digests.
This module orchestrates the pipeline for discovering, scraping and
normalizing newsletter posts into a single markdown digest.
"""

__version__ = "0.1.0"

# Expose submodules
from . import ingestion
