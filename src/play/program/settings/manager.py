import json
import os
from typing import Any

from loguru import logger
from pydantic import ValidationError

from play.program.settings.models import AppModel


class SettingsManager:
    """
    Builds the defaults for a run from the Pydantic schema.

    Every field of `AppModel` can be overridden with a `<PREFIX>_<FIELD>`
    environment variable. The environment is read on each `load()`, never at
    import, and nothing is read from or written to disk.
    """

    def __init__(self, prefix: str = "PLAY"):
        self.prefix = prefix

    def check_environment(self, settings: dict[str, Any], prefix: str = "") -> dict[str, Any]:
        checked_settings = {}

        for key, value in settings.items():
            environment_variable = f"{prefix}_{key}".upper()
            new_value = os.getenv(environment_variable)

            if not new_value:
                checked_settings[key] = value
            elif isinstance(value, bool):
                checked_settings[key] = new_value.lower() == "true" or new_value == "1"
            elif isinstance(value, int):
                checked_settings[key] = int(new_value)
            elif isinstance(value, float):
                checked_settings[key] = float(new_value)
            else:
                checked_settings[key] = new_value

        return checked_settings

    def load(self, **overrides: Any) -> dict[str, Any]:
        """
        Schema defaults with environment overrides applied, not yet validated.

        Fields given in `overrides` win and their environment variables are
        not read at all.

        Raises:
            ValueError: If an environment value can't be parsed.
        """

        defaults = json.loads(AppModel().model_dump_json())
        pending = {key: value for key, value in defaults.items() if key not in overrides}

        try:
            values = self.check_environment(pending, self.prefix)
        except ValueError as e:
            logger.error(f"Error parsing environment settings: {e}")
            raise

        return {**values, **overrides}


def format_validation_error(e: ValidationError) -> str:
    """Format validation errors in a user-friendly way"""

    messages = []

    for error in e.errors():
        field = ".".join(str(x) for x in error["loc"])
        message = error.get("msg")
        messages.append(f"• {field}: {message}")

    return "\n".join(messages)


settings_manager = SettingsManager()
