"""Core data structures for the line-oriented document."""

from termedit.core.row import Row
from termedit.core.document import Document
from termedit.core.highlight import Highlight, RuleSet, classify

__all__ = ["Row", "Document", "Highlight", "RuleSet", "classify"]
