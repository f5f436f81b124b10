"""Keybinding registry for Rota.

Single source of truth for which key triggers which browser action. The
footer hint line and ``rota keys`` are both generated from it.

Modified: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional

from ..core.exceptions import ConfigurationError


class Action(Enum):
    """Browser actions a key can trigger."""
    QUIT = "quit"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    OPEN = "open"
    PARENT = "parent"
    REFRESH = "refresh"


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Textual key name, e.g. "j", "down", "backspace"
    action: Action
    description: str
    category: str = "General"


# Short labels for the footer hint line
HINT_LABELS: Dict[Action, str] = {
    Action.MOVE_DOWN: "down",
    Action.MOVE_UP: "up",
    Action.OPEN: "open dir",
    Action.PARENT: "parent",
    Action.REFRESH: "refresh",
    Action.QUIT: "quit",
}

KEY_DISPLAY: Dict[str, str] = {
    "down": "↓",
    "up": "↑",
    "left": "←",
    "right": "→",
    "enter": "Enter",
    "backspace": "Backspace",
    "escape": "Esc",
    "space": "Space",
    "tab": "Tab",
}


def display_key(key: str) -> str:
    """Human-friendly rendering of a Textual key name."""
    return KEY_DISPLAY.get(key, key)


class KeybindingRegistry:
    """Registry mapping keys to browser actions."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Application
        self.register("q", Action.QUIT, "Quit", "Application")
        self.register("r", Action.REFRESH, "Refresh current directory", "Application")

        # Navigation
        self.register("j", Action.MOVE_DOWN, "Move selection down", "Navigation")
        self.register("down", Action.MOVE_DOWN, "Move selection down", "Navigation")
        self.register("k", Action.MOVE_UP, "Move selection up", "Navigation")
        self.register("up", Action.MOVE_UP, "Move selection up", "Navigation")
        self.register("enter", Action.OPEN, "Open selected directory", "Navigation")
        self.register("backspace", Action.PARENT, "Go to parent directory", "Navigation")

    def register(self, key: str, action: Action, description: str,
                 category: str = "General") -> None:
        """Register a keybinding, replacing any previous use of ``key``."""
        self.keybindings[key] = Keybinding(
            key=key,
            action=action,
            description=description,
            category=category,
        )

    def resolve(self, key: str) -> Optional[Action]:
        """Action bound to ``key``, or None for unbound keys."""
        binding = self.keybindings.get(key)
        return binding.action if binding else None

    def keys_for(self, action: Action) -> List[str]:
        return [b.key for b in self.keybindings.values() if b.action == action]

    def apply_overrides(self, overrides: Mapping[str, Iterable[str]]) -> None:
        """
        Rebind actions from configuration.

        Each named action loses all of its default keys and gets exactly the
        listed ones.

        Raises:
            ConfigurationError: On an unknown action or a key bound to two actions
        """
        parsed: Dict[Action, List[str]] = {}
        for name, keys in overrides.items():
            try:
                action = Action(name)
            except ValueError:
                known = ", ".join(a.value for a in Action)
                raise ConfigurationError(f"Unknown action '{name}' (known: {known})") from None
            parsed[action] = list(keys)

        claimed: Dict[str, Action] = {}
        for action, keys in parsed.items():
            for key in keys:
                if key in claimed and claimed[key] != action:
                    raise ConfigurationError(
                        f"Key '{key}' bound to both '{claimed[key].value}' and '{action.value}'"
                    )
                claimed[key] = action

        for action, keys in parsed.items():
            template = next(
                (b for b in self.keybindings.values() if b.action == action), None
            )
            for key in self.keys_for(action):
                del self.keybindings[key]
            for key in keys:
                existing = self.keybindings.get(key)
                if existing is not None and existing.action not in parsed:
                    raise ConfigurationError(
                        f"Key '{key}' is already bound to '{existing.action.value}'"
                    )
                self.register(
                    key,
                    action,
                    template.description if template else HINT_LABELS[action],
                    template.category if template else "General",
                )

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result: Dict[str, List[Keybinding]] = {}
        for binding in self.keybindings.values():
            result.setdefault(binding.category, []).append(binding)
        return result

    def format_hint_line(self) -> str:
        """One-line key summary for the status footer."""
        parts = []
        for action in (Action.MOVE_DOWN, Action.MOVE_UP, Action.OPEN,
                       Action.PARENT, Action.REFRESH, Action.QUIT):
            keys = self.keys_for(action)
            if keys:
                shown = "/".join(display_key(k) for k in keys)
                parts.append(f"{shown} {HINT_LABELS[action]}")
        return "Keys: " + " | ".join(parts)

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        lines.append("Rota - read-only directory browser\n")
        lines.append("=" * 40)

        categories = self.get_bindings_by_category()
        for category in sorted(categories.keys()):
            lines.append(f"\n{category}:")
            lines.append("-" * len(category) + "-")

            for binding in categories[category]:
                key_str = display_key(binding.key).ljust(12)
                lines.append(f"  {key_str} {binding.description}")

        lines.append("\n" + "=" * 40)
        return "\n".join(lines)


def build_registry(overrides: Optional[Mapping[str, Iterable[str]]] = None) -> KeybindingRegistry:
    """Default registry with configuration overrides applied."""
    registry = KeybindingRegistry()
    if overrides:
        registry.apply_overrides(overrides)
    return registry
