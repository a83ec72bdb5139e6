"""The clock window, its preferences dialog and the command that starts them."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable

from samclock.dial import Circle, Line
from samclock.face import ClockFace
from samclock.settings import ClockSettings

REFRESH_MS = 200
BACKGROUND = "black"
MIN_WIDTH = 50
MAX_WIDTH = 1000


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="samclock", description="A frameless analogue desktop clock."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="settings file to read at start and write on close",
    )
    return parser.parse_args(argv)


class PreferencesDialog:
    """Options editor that applies every change to its window at once."""

    _OPTIONS: dict[str, Callable[[ClockFace, bool], None]] = {
        "sec_hand": lambda face, on: setattr(face, "has_sec_hand", on),
        "dial_circle": lambda face, on: setattr(face.dial, "has_circle", on),
        "minute_marks": lambda face, on: setattr(face.dial, "has_minute_marks", on),
        "five_minute_marks": lambda face, on: setattr(
            face.dial, "has_five_minute_marks", on
        ),
        "points": lambda face, on: setattr(face.dial, "has_points", on),
        "sweeping_second_hand": lambda face, on: setattr(
            face, "has_sweeping_second_hand", on
        ),
        "rounded_hand_edges": lambda face, on: setattr(
            face, "has_rounded_hand_edges", on
        ),
    }

    def __init__(self, window: ClockWindow) -> None:
        self.window = window
        self.marks_enabled = not window.face.dial.has_points
        self._top: Any = None
        self._vars: dict[str, Any] = {}
        self._mark_buttons: list[Any] = []
        if window._root is not None:
            self._build(window._root)

    def _state(self) -> dict[str, Any]:
        face = self.window.face
        return {
            "width": face.width,
            "sec_hand": face.has_sec_hand,
            "dial_circle": face.dial.has_circle,
            "minute_marks": face.dial.has_minute_marks,
            "five_minute_marks": face.dial.has_five_minute_marks,
            "points": face.dial.has_points,
            "sweeping_second_hand": face.has_sweeping_second_hand,
            "rounded_hand_edges": face.has_rounded_hand_edges,
        }

    def _set_width(self, value: int | str) -> None:
        self.window._resize(int(float(value)))

    def _set_option(self, name: str, checked: bool) -> None:
        try:
            setter = self._OPTIONS[name]
        except KeyError:
            raise ValueError(f"unknown option: {name!r}") from None
        setter(self.window.face, bool(checked))
        if name == "points":
            self.marks_enabled = not checked
            state = "normal" if self.marks_enabled else "disabled"
            for button in self._mark_buttons:
                button.configure(state=state)
        self.window.redraw()

    def _build(self, root: Any) -> None:
        import tkinter as tk

        top = tk.Toplevel(root)
        top.title("Preferences")
        self._top = top
        state = self._state()

        scale = tk.Scale(
            top,
            label="Clock size",
            from_=MIN_WIDTH,
            to=MAX_WIDTH,
            orient=tk.HORIZONTAL,
            command=self._set_width,
        )
        scale.set(state["width"])
        scale.pack(fill=tk.X, padx=8, pady=4)

        labels = {
            "sec_hand": "Second hand",
            "dial_circle": "Dial circle",
            "minute_marks": "Minute marks",
            "five_minute_marks": "Five-minute marks",
            "points": "Points instead of marks",
            "sweeping_second_hand": "Sweeping second hand",
            "rounded_hand_edges": "Rounded hand edges",
        }
        for name, text in labels.items():
            var = tk.BooleanVar(master=top, value=state[name])
            self._vars[name] = var
            button = tk.Checkbutton(
                top,
                text=text,
                variable=var,
                command=lambda n=name, v=var: self._set_option(n, v.get()),
            )
            button.pack(anchor=tk.W, padx=8)
            if name in ("minute_marks", "five_minute_marks"):
                self._mark_buttons.append(button)
                if not self.marks_enabled:
                    button.configure(state="disabled")


class ClockWindow:
    """A frameless, always-on-top window showing a clock face."""

    def __init__(
        self,
        settings: ClockSettings | None = None,
        settings_path: Path | str | None = None,
    ) -> None:
        settings = settings if settings is not None else ClockSettings()
        self.face = ClockFace.from_settings(settings)
        self.position: tuple[int, int] = settings.position
        self.settings_path = Path(settings_path) if settings_path is not None else None
        self._root: Any = None
        self._canvas: Any = None
        self._drag_offset: tuple[int, int] | None = None

    def _resize(self, width: int) -> None:
        self.face.width = width
        if self._root is not None:
            self._root.geometry(f"{width}x{width}")
            self._canvas.configure(width=width, height=width)
        self.redraw()

    def run(self) -> None:
        """Show the window and process events until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title("SamClock")
        root.overrideredirect(True)
        root.configure(bg=BACKGROUND)
        for attribute, value in (("-topmost", True), ("-transparentcolor", BACKGROUND)):
            try:
                root.wm_attributes(attribute, value)
            except tk.TclError:
                pass
        width = self.face.width
        x, y = self.position
        root.geometry(f"{width}x{width}+{x}+{y}")
        root.resizable(False, False)
        canvas = tk.Canvas(
            root, width=width, height=width, bg=BACKGROUND, highlightthickness=0
        )
        canvas.pack()
        self._root, self._canvas = root, canvas

        canvas.bind("<ButtonPress-1>", self._on_press)
        canvas.bind("<B1-Motion>", self._on_motion)
        canvas.bind("<ButtonRelease-1>", self._on_release)
        canvas.bind("<Button-3>", self._on_context_menu)
        root.bind("<Key>", self._on_key)
        root.protocol("WM_DELETE_WINDOW", self.close)

        def tick() -> None:
            if self._root is None:
                return
            self.redraw()
            self._root.after(REFRESH_MS, tick)

        tick()
        root.focus_force()
        root.mainloop()

    def redraw(self) -> list[Line | Circle]:
        """Draw the face for the current time and return the shapes drawn."""
        shapes = self.face.shapes()
        canvas = self._canvas
        if canvas is None:
            return shapes
        canvas.delete("all")
        for shape in shapes:
            if isinstance(shape, Line):
                canvas.create_line(
                    *shape.start,
                    *shape.end,
                    fill=shape.color,
                    width=shape.thickness,
                    capstyle="round" if shape.rounded else "projecting",
                )
            else:
                cx, cy = shape.center
                r = shape.radius
                canvas.create_oval(
                    cx - r,
                    cy - r,
                    cx + r,
                    cy + r,
                    outline=shape.color,
                    width=shape.thickness,
                    fill=shape.color if shape.filled else "",
                )
        return shapes

    def close(self) -> ClockSettings:
        """Save the settings, close the window and return what was saved."""
        if self._root is not None:
            self.position = (self._root.winfo_x(), self._root.winfo_y())
        settings = self.face.to_settings(self.position)
        settings.save(self.settings_path)
        if self._root is not None:
            root = self._root
            self._root, self._canvas = None, None
            root.destroy()
        return settings

    def open_preferences(self) -> PreferencesDialog:
        """Open the preferences dialog for this window."""
        return PreferencesDialog(self)

    def _on_key(self, event: Any) -> PreferencesDialog | None:
        if getattr(event, "char", "") == "c":
            return self.open_preferences()
        return None

    def _on_press(self, event: Any) -> None:
        self._drag_offset = (
            event.x_root - self._root.winfo_x(),
            event.y_root - self._root.winfo_y(),
        )

    def _on_motion(self, event: Any) -> None:
        if self._drag_offset is None:
            return
        dx, dy = self._drag_offset
        self.position = (event.x_root - dx, event.y_root - dy)
        self._root.geometry(f"+{self.position[0]}+{self.position[1]}")

    def _on_release(self, event: Any) -> None:
        self._drag_offset = None

    def _on_context_menu(self, event: Any) -> None:
        import tkinter as tk

        menu = tk.Menu(self._root, tearoff=False)
        menu.add_command(label="Preferences", command=self.open_preferences)
        menu.add_command(label="Close", command=self.close)
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()


def main(argv: list[str] | None = None) -> int:
    """Start the clock with the saved settings."""
    args = parse_args(argv)
    settings = ClockSettings.load(args.config)
    window = ClockWindow(settings, args.config)
    window.run()
    return 0