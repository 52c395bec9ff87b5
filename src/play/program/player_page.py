import json
from pathlib import Path

from play.program.media import ServedResource

CONFIG_MARKER = "/*__CONFIG__*/"
AUDIO_URL = "/audio"

static_dir_path = Path(__file__).resolve().parents[1] / "static"
player_html_path = static_dir_path / "player.html"


class PlayerPage:
    """The player HTML with the run configuration injected, rendered once at startup."""

    def __init__(self, html: str) -> None:
        self.html = html

    @classmethod
    def render(
        cls,
        resource: ServedResource,
        speed: float,
        template_path: Path = player_html_path,
    ) -> "PlayerPage":
        """
        Read the player template and replace its config marker.

        Raises:
            OSError: If the template can't be read.
        """

        template = template_path.read_text(encoding="utf-8")
        config = {"fileName": resource.name, "speed": speed, "audioUrl": AUDIO_URL}

        # keep a file name containing "</script>" from closing the inline script
        config_json = json.dumps(config).replace("</", "<\\/")

        return cls(template.replace(CONFIG_MARKER, f"window.__CONFIG__ = {config_json};"))
