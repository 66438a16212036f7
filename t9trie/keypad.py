"""
t9trie.keypad
=============
Reads one key sequence from a physical numpad.

The listener runs on pynput's own thread; the captured keys are handed back
to the caller once the sequence is confirmed or cancelled.
"""

from __future__ import annotations

from typing import Callable

try:
    from pynput import keyboard
    from pynput.keyboard import Key as PKey, KeyCode
except ImportError as exc:
    raise ImportError(
        f"keypad capture needs a working pynput ({exc}).\n"
        "Install it with:  pip install 't9trie[keypad]'"
    ) from exc

from .keys import Key

# Numpad keys when Num Lock is OFF (pynput reports these as named keys).
# Some names (e.g. insert) are missing on macOS.
_NAMED: dict[PKey, str] = {
    getattr(PKey, name): action
    for name, action in (
        ("insert",    "confirm"),
        ("end",       "1"),
        ("down",      "2"),
        ("page_down", "3"),
        ("left",      "4"),
        ("right",     "6"),
        ("home",      "7"),
        ("up",        "8"),
        ("page_up",   "9"),
        ("backspace", "backspace"),
        ("esc",       "cancel"),
        ("enter",     "confirm"),
    )
    if hasattr(PKey, name)
}

_CHARS: dict[str, str] = {
    "0": "confirm",
    "*": "backspace",
}

# Windows virtual key codes for numpad (fallback)
_VK: dict[int, str] = {
    96: "confirm", 97: "1", 98: "2", 99: "3",
    100: "4", 101: "5", 102: "6", 103: "7",
    104: "8", 105: "9",
    106: "backspace",
    13:  "confirm",
    27:  "cancel",
}


def key_to_action(key: PKey | KeyCode) -> str | None:
    """Map a pynput key event to a key symbol (``"1"``..``"9"``) or an action name."""
    if key in _NAMED:
        return _NAMED[key]

    if isinstance(key, KeyCode):
        ch = key.char or ""
        if ch in _CHARS:
            return _CHARS[ch]
        if len(ch) == 1 and ch in "123456789":
            return ch
        vk = getattr(key, "vk", None)
        # X11 reports a keysym as vk for character keys; only bare codes are numpad VKs
        if not ch and vk is not None:
            return _VK.get(vk)

    return None


class SequenceCapture:
    """
    Collects letter keys until confirmed.

    ``on_press`` is the pynput callback; it returns ``False`` to stop the
    listener once the sequence is finished.
    """

    def __init__(self, on_change: Callable[[list[Key]], None] | None = None) -> None:
        self.keys: list[Key] = []
        self.cancelled = False
        self.done = False
        self._on_change = on_change

    def on_press(self, key: PKey | KeyCode) -> bool | None:
        action = key_to_action(key)
        if action is None:
            return None

        if action == "confirm":
            self.done = True
            return False
        if action == "cancel":
            self.cancelled = True
            self.done = True
            return False
        if action == "backspace":
            if self.keys:
                self.keys.pop()
        else:
            self.keys.append(Key(action))

        if self._on_change is not None:
            self._on_change(self.keys)
        return None

    @property
    def result(self) -> list[Key] | None:
        return None if self.cancelled else list(self.keys)


def capture_sequence(on_change: Callable[[list[Key]], None] | None = None) -> list[Key] | None:
    """
    Block until a sequence is typed on the numpad.

    Returns the keys, or ``None`` if Esc was pressed.
    """
    capture = SequenceCapture(on_change)
    with keyboard.Listener(on_press=capture.on_press, suppress=False) as listener:
        listener.join()
    return capture.result
