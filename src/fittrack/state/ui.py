"""UI preferences state slice and its reducers."""

from dataclasses import dataclass, replace
from enum import Enum


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class UIState:
    is_sidebar_open: bool = True
    theme: Theme = Theme.DARK

    def to_dict(self) -> dict:
        return {"is_sidebar_open": self.is_sidebar_open, "theme": self.theme.value}

    @classmethod
    def from_dict(cls, data: dict) -> "UIState":
        try:
            theme = Theme(data.get("theme", Theme.DARK.value))
        except ValueError:
            theme = Theme.DARK
        return cls(is_sidebar_open=bool(data.get("is_sidebar_open", True)), theme=theme)


def toggle_sidebar(state: UIState) -> UIState:
    return replace(state, is_sidebar_open=not state.is_sidebar_open)


def set_sidebar_open(state: UIState, value: bool) -> UIState:
    return replace(state, is_sidebar_open=value)


def set_theme(state: UIState, theme: Theme) -> UIState:
    return replace(state, theme=Theme(theme))
