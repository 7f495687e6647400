"""Allow running vcprompt with ``python -m vcprompt``."""

from vcprompt.cli import app

app()
