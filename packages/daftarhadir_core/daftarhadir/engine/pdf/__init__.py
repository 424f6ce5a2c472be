"""PDF compiler - draws a laid out sheet with ReportLab."""

from .pdf_compiler import PDFCompiler

__all__ = ["PDFCompiler"]
