"""
Diagnostics of absorbed failures.

Some failures do not stop a deployment: an unparseable resource quantity is
dropped, a failing network lookup leaves the network unset and an invalid
scale label keeps the default replica count. Each of them is logged and
recorded as a :class:`Diagnostic` returned with the compiled service spec.
"""

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from fnswarm.logger import get_logger


logger = get_logger(__name__)


class DiagnosticKind(str, Enum):
    INVALID_QUANTITY = "invalid_quantity"
    NETWORK_LOOKUP_FAILED = "network_lookup_failed"
    INVALID_SCALE_LABEL = "invalid_scale_label"


class Diagnostic(BaseModel):
    """ A non-fatal failure absorbed while compiling a deployment. """
    kind: DiagnosticKind = Field(..., description="Kind of failure")
    field: str = Field(..., description="Request field concerned (e.g., 'limits.memory')")
    value: Optional[str] = Field(default=None, description="Offending value")
    message: str = Field(..., description="Human readable description")

    model_config = ConfigDict(frozen=True)


def record(diagnostics: Optional[List[Diagnostic]], kind: DiagnosticKind,
           field: str, value: Optional[str], message: str) -> Diagnostic:
    """
    Log a non-fatal failure and append it to `diagnostics`.

    Args:
        diagnostics (Optional[List[Diagnostic]]): List collecting the diagnostics, ignored when `None`.
        kind (DiagnosticKind): Kind of failure.
        field (str): Request field concerned.
        value (Optional[str]): Offending value.
        message (str): Description of the failure.

    Returns:
        Diagnostic: The recorded diagnostic.
    """
    diagnostic = Diagnostic(kind=kind, field=field, value=value, message=message)
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.append(diagnostic)
    return diagnostic
