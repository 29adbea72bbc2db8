"""Bookkeeping of which model, scripts and textures belong to which object."""

from __future__ import annotations


class ModelFolder:
    """Maps object names to a model file name or a model description."""

    def __init__(self) -> None:
        self._models: dict[str, str] = {}

    def append(self, object_name: str, model_name: str) -> None:
        self._models[object_name] = model_name

    def remove(self, object_name: str) -> None:
        self._models.pop(object_name, None)

    def replace(self, object_name: str, model_name: str) -> None:
        self._models[object_name] = model_name

    def model(self, object_name: str) -> str:
        """Model of the object, or an empty string if none is recorded."""
        return self._models.get(object_name, "")

    def clear(self) -> None:
        self._models.clear()

    def __contains__(self, object_name: object) -> bool:
        return object_name in self._models


class ScriptFolder:
    """Maps object names to the script attached to them."""

    def __init__(self) -> None:
        self._scripts: dict[str, str] = {}

    def add_script(self, object_name: str, script_name: str) -> None:
        """Attach a script, replacing any script attached before."""
        self._scripts[object_name] = script_name

    def scripts(self, object_name: str) -> list[str]:
        """Scripts of the object; empty if it has none."""
        if object_name not in self._scripts:
            return []
        return [self._scripts[object_name]]

    def clear(self) -> None:
        self._scripts.clear()


class TextureFolder:
    """Maps object names to the texture file they use."""

    def __init__(self) -> None:
        self._textures: dict[str, str] = {}

    def append(self, object_name: str, texture_name: str) -> None:
        self._textures[object_name] = texture_name

    def remove(self, object_name: str) -> None:
        self._textures.pop(object_name, None)

    def replace(self, object_name: str, texture_name: str) -> None:
        self._textures[object_name] = texture_name

    def textures(self, object_name: str) -> list[str]:
        """Textures of the object; empty if it has none."""
        if object_name not in self._textures:
            return []
        return [self._textures[object_name]]

    def clear(self) -> None:
        self._textures.clear()