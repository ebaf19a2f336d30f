"""
vitae - portfolio timeline and resume toolkit

Lays out a personal resume as a visual, filterable timeline and keeps the
resume document itself editable and printable.

Architecture:
- Timeline Context: Date resolution, zoom-aware scale math, column packing, layout pass
- Document Context: Resume document model, validation, persistence, editing
- Rendering Context: Date formatting, condensed grouping, HTML rendering
"""

__version__ = "0.1.0"
