# --- rmap_lib/config.py ---
import configparser
import logging
from typing import Any, Dict

from rmap_lib.rendering.constants import DEFAULT_STYLES

log = logging.getLogger("rmap.config")


class ConfigService:
    """Manages reading from and writing to the rmap.cfg file."""

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.defaults = {
            "Paths": {
                "input_dir": "./bins",
                "output_dir": "./output",
                "extension": ".room",
            },
            "Rooms": {
                "id_separator": "_Room_",
            },
            "Render": {k: str(v) for k, v in DEFAULT_STYLES.items()},
        }

    def get_settings(self) -> dict:
        """Reads settings from the config file, applying defaults if missing."""
        config = configparser.ConfigParser()
        # Apply defaults first
        for section, values in self.defaults.items():
            config[section] = values

        # Read existing file to override defaults
        if not config.read(self.config_path):
            log.info("Config file not found at %s. Creating with defaults.", self.config_path)
            self.save_settings(self._config_to_dict(config))

        return self._config_to_dict(config)

    def save_settings(self, settings: dict):
        """Saves a dictionary of settings to the config file."""
        config = configparser.ConfigParser()
        for section, values in settings.items():
            config[section] = {k: str(v) for k, v in values.items()}

        try:
            with open(self.config_path, "w") as configfile:
                config.write(configfile)
            log.info("Settings successfully saved to %s", self.config_path)
        except IOError as e:
            log.error("Failed to write settings to %s: %s", self.config_path, e)

    def get_render_options(self) -> Dict[str, Any]:
        """Returns the [Render] section typed for the PNG renderer."""
        render = self.get_settings()["Render"]
        options: Dict[str, Any] = dict(render)
        try:
            options["cleanup_iterations"] = int(render["cleanup_iterations"])
        except ValueError:
            log.warning(
                "Invalid cleanup_iterations '%s'; using %s.",
                render["cleanup_iterations"],
                DEFAULT_STYLES["cleanup_iterations"],
            )
            options["cleanup_iterations"] = DEFAULT_STYLES["cleanup_iterations"]
        options["outline"] = render["outline"].strip().lower() in ("1", "true", "yes", "on")
        return options

    def _config_to_dict(self, config: configparser.ConfigParser) -> dict:
        """Converts a ConfigParser object to a nested dictionary."""
        return {s: dict(config.items(s)) for s in config.sections()}
