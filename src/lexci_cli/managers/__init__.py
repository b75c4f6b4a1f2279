"""Manager classes for the lexical-ci CLI."""


# Lazy imports: the orchestrator pulls in services that import managers.base
def __getattr__(name):
    """Lazy import managers to avoid circular dependencies."""
    if name == "MatrixOrchestrator":
        from .matrix_orchestrator import MatrixOrchestrator

        return MatrixOrchestrator
    if name == "RunResult":
        from .matrix_orchestrator import RunResult

        return RunResult
    msg = f"module 'lexci_cli.managers' has no attribute '{name}'"
    raise AttributeError(msg)


__all__ = [
    "MatrixOrchestrator",
    "RunResult",
]
