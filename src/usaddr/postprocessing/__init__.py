"""Post-processing module for assembling tagged results."""

from usaddr.postprocessing.grouping import TaggedToken, assemble, group_by_tag

__all__ = ["TaggedToken", "assemble", "group_by_tag"]
