from __future__ import annotations


class RetirementEngineError(Exception):
    """Base class for failures raised by the projection engine."""


class InvalidHorizonError(RetirementEngineError, ValueError):
    """Target retirement age is not after the current age."""

    def __init__(self, current_age: int, target_retirement_age: int):
        self.current_age = current_age
        self.target_retirement_age = target_retirement_age
        super().__init__(
            f"Target retirement age ({target_retirement_age}) must be greater "
            f"than current age ({current_age})."
        )


class UpstreamDataError(RetirementEngineError):
    """The financial data provider could not supply the savings aggregate."""

    def __init__(self, user_id, message: str):
        self.user_id = user_id
        super().__init__(f"Could not fetch retirement savings for user {user_id!r}: {message}")


class SimulationCancelledError(RetirementEngineError):
    """Monte Carlo run was stopped through its cancel event."""
