r"""Resources of the Loterias API."""

from __future__ import annotations

__all__ = ["BaseResource", "Draws", "Results"]

from loterias.resources.base import BaseResource
from loterias.resources.draws import Draws
from loterias.resources.results import Results
