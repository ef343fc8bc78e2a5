"""Exception types raised across the package."""


class DevaiError(Exception):
    """Base error for every failure the package reports."""


class CommandAgentNotFoundError(DevaiError):
    """Raised when a command agent file cannot be found."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Command Agent not found at: {path}")


class ModelMissingError(DevaiError):
    """Raised when an agent has no model configured."""

    def __init__(self, agent_path: str) -> None:
        self.agent_path = agent_path
        super().__init__(f"Model missing for agent: {agent_path}")


class CauseError(DevaiError):
    """An error carrying a context message and the cause that triggered it."""

    def __init__(self, context: str, cause: object) -> None:
        self.context = context
        self.cause = str(cause)
        super().__init__(f"Error: {context}  Cause: {self.cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause