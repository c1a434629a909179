from tableblocks.extractors.block_data import extract_block_data
from tableblocks.extractors.sheet import SheetExtractor

__all__ = ["extract_block_data", "SheetExtractor"]
