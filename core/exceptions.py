# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class CyclicDependencyError(BusinessRuleError):
    """Raised when the dependency graph contains a cycle."""
    def __init__(self, predecessor_id: str, successor_id: str, cycle: list[str]):
        path = " -> ".join(cycle)
        super().__init__(
            f"Cannot calculate critical path: cyclic dependency "
            f"{predecessor_id} -> {successor_id} (cycle: {path}).",
            code="SCHEDULE_CYCLE",
        )
        self.predecessor_id = predecessor_id
        self.successor_id = successor_id
        self.cycle = list(cycle)


class InconsistentScheduleError(BusinessRuleError):
    """Raised when a computed slack is negative."""
    def __init__(self, task_id: str, slack: int):
        super().__init__(
            f"Inconsistent schedule: task {task_id} has negative slack ({slack} days).",
            code="SCHEDULE_NEGATIVE_SLACK",
        )
        self.task_id = task_id
        self.slack = slack
