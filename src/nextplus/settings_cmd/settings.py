"""Settings manager: the only writer of persisted configuration."""

import sys
from pathlib import Path

from nextplus.config import coerce_value
from nextplus.create_cmd.target_folder import pick_folder
from nextplus.prompts import PromptConfig, choose, is_cancelled

SELECT_FOLDER = "Select Folder…"
CLEAR_LOCATION = "Clear Default Location"


class SettingsManager:

    def __init__(self, store, *, output=None, prompt_config=None):
        self._store = store
        self._output = output if output is not None else sys.stderr
        self._prompt_config = prompt_config or PromptConfig(output=self._output)

    def _notify(self, message):
        print(message, file=self._output)

    def current_default_location(self):
        return self._store.snapshot().get("default_location").strip()

    def set_default_location(self, folder):
        location = str(Path(folder).expanduser().resolve())
        self._store.update("default_location", location)
        self._notify(f"Default project location set to: {location}")
        return location

    def clear_default_location(self):
        self._store.update("default_location", "")
        self._notify("Default project location cleared.")

    def choose_default_location(self):
        """Interactive select-or-clear flow; dismissing any prompt changes nothing."""
        current = self.current_default_location()
        header = f"Current default: {current}" if current else "No default project location set"
        choice = choose(
            header, 0, [SELECT_FOLDER, CLEAR_LOCATION],
            descriptions=[
                "Choose a directory to use as the default project location",
                "Re-enable the folder picker for every project",
            ],
            config=self._prompt_config,
        )
        if is_cancelled(choice):
            return
        if choice.value == 2:
            self.clear_default_location()
            return

        picked = pick_folder("Select default Next.js project location", self._prompt_config)
        if is_cancelled(picked):
            return
        self.set_default_location(picked.value)

    def update(self, key, raw_value):
        """Coerce *raw_value* to the type declared for *key* and persist it."""
        value = coerce_value(key, raw_value)
        self._store.update(key, value)
        self._notify(f"{key} set to: {value!r}")
        return value
