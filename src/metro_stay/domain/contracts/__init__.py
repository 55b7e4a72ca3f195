"""Contracts for caller-owned collaborators of a search run."""

from metro_stay.domain.contracts.result_sink import ResultSinkProtocol
from metro_stay.domain.contracts.run_token import RunTokenProtocol

__all__ = ["ResultSinkProtocol", "RunTokenProtocol"]
