"""Configuration model for shellrun."""

from pydantic import BaseModel


class RunnerConfig(BaseModel):
    """Interpreter binary and the argument template the command is inserted into."""

    executable: str
    argument_template: str
