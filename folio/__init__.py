"""Folio - portfolio screenshot capture and animated gallery view.

Two independent halves share a single contract, the slug of a project name:
the capturer writes ``<slug>.png`` files, the gallery reads them back as
``/images/<slug>.png``.
"""

__version__ = "1.0.0"
__author__ = "Folio Team"
